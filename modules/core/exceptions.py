"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Callers branch on the exception class (or its code), never on message text.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NetworkError(ApplicationError):
    """Raised when a request could not be sent or no response was received."""

    def __init__(self, message: str = "Request failed", cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message, code="NET_REQUEST_FAILED")


class ApiStatusError(ApplicationError):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"API error: {status_code}", code="API_STATUS_ERROR")


class ParseError(ApplicationError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str = "Failed to parse response") -> None:
        super().__init__(message, code="API_PARSE_ERROR")


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when required configuration or secrets are missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
