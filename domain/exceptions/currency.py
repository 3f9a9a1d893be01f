class CurrencyException(Exception):
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidAmountError(CurrencyException):
    default_message = "Invalid amount entered"


class InvalidCurrencyCodeError(CurrencyException):
    default_message = "Invalid currency code provided"


class NetworkError(CurrencyException):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class ApiError(CurrencyException):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"API error: {detail}")


class RateNotFoundError(CurrencyException):
    default_message = "Exchange rate not found for the selected currencies"


class NoDataAvailableError(CurrencyException):
    default_message = "No exchange rate data available"


class StorageError(CurrencyException):
    default_message = "Storage operation failed"
