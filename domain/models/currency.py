from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Currency:
    code: str
    name: str = field(compare=False)
    flag: str = field(default="", compare=False)


@dataclass(frozen=True)
class RateTable:
    base_code: str
    rates: dict[str, float]
    fetched_at: datetime

    def __post_init__(self):
        bad = [code for code, value in self.rates.items() if not value > 0]
        if bad:
            raise ValueError(f"Non-positive rates for {', '.join(sorted(bad))}")

    def rate_for(self, code: str) -> float | None:
        if code == self.base_code:
            return 1.0
        return self.rates.get(code)


@dataclass(frozen=True)
class ConversionResult:
    from_currency: Currency
    to_currency: Currency
    from_amount: float
    to_amount: float
    rate: float
    computed_at: datetime


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    from_code: str
    to_code: str
    from_amount: float
    to_amount: float
    rate: float
    timestamp: datetime


@dataclass(frozen=True)
class UserPreferences:
    default_from: str = "EUR"
    default_to: str = "PLN"
    decimal_places: int = 2
    auto_refresh_interval: float = 300.0


@dataclass(frozen=True)
class EngineState:
    """Snapshot of the conversion engine as seen by the presentation layer."""

    selected_from: Currency
    selected_to: Currency
    last_result: ConversionResult | None = None
    is_loading: bool = False
    last_error: Exception | None = None
    last_updated: datetime | None = None

    @property
    def from_currency(self) -> Currency:
        return self.selected_from

    @property
    def to_currency(self) -> Currency:
        return self.selected_to

    @property
    def converted_amount(self) -> float | None:
        return self.last_result.to_amount if self.last_result else None

    @property
    def exchange_rate(self) -> float | None:
        return self.last_result.rate if self.last_result else None

    @property
    def error_message(self) -> str | None:
        return str(self.last_error) if self.last_error else None


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: str | None = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=reason)
