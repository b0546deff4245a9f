"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class MissingFieldError(ValidationError):
    """Raised when a required input field is empty or absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required", code="MISSING_FIELD")


class NotANumberError(ValidationError):
    """Raised when a numeric field does not parse as a finite number."""

    def __init__(self, field: str, value: object):
        self.field = field
        super().__init__(f"{field} must be a number, got {value!r}", code="NOT_A_NUMBER")


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a usable magnitude."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"{field} {reason}", code="INVALID_AMOUNT")


class UnknownTimeframeError(ValidationError):
    """Raised when a chart timeframe key is not one of the supported windows."""

    def __init__(self, key: str, allowed: list[str]):
        self.key = key
        super().__init__(
            f"Unknown timeframe {key!r}; expected one of: {', '.join(allowed)}",
            code="INVALID_TIMEFRAME",
        )


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class MarketDataUnavailableError(AppError):
    """Raised when the market data provider fails outright."""

    def __init__(self, message: str):
        super().__init__(message, code="MARKET_DATA_UNAVAILABLE")


class IndexOutOfRangeError(AppError, IndexError):
    """
    Raised when a positional delete targets a row that does not exist.

    Valid UI flows never produce this; it signals an index-mapping bug upstream.
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index} out of range for log of length {length}",
            code="INDEX_OUT_OF_RANGE",
        )
