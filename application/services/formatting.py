import math

from domain.models.currency import Currency, ValidationResult

MAX_AMOUNT = 1_000_000_000


def validate_amount(text: str) -> ValidationResult:
    """Advisory check for user-typed amounts, run before calling convert()."""
    if not text:
        return ValidationResult.invalid("Amount cannot be empty")

    try:
        amount = float(text)
    except ValueError:
        return ValidationResult.invalid("Please enter a valid number")

    if not math.isfinite(amount):
        return ValidationResult.invalid("Please enter a valid number")

    if amount <= 0:
        return ValidationResult.invalid("Amount must be greater than zero")

    if amount > MAX_AMOUNT:
        return ValidationResult.invalid("Amount is too large")

    return ValidationResult.valid()


def format_rate(rate: float) -> str:
    if rate >= 1000:
        return f"{rate:.2f}"
    elif rate >= 100:
        return f"{rate:.3f}"
    elif rate >= 10:
        return f"{rate:.4f}"
    return f"{rate:.6f}"


def format_amount(amount: float, currency: Currency, decimal_places: int = 2) -> str:
    return f"{amount:,.{decimal_places}f} {currency.code}"
