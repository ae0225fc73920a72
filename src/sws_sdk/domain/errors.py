from enum import Enum


class ErrorCode(Enum):
    """Error codes raised by the SDK.

    Codes are opaque identifiers; their numeric order carries no meaning.
    """

    # Configuration errors
    BAD_TIMEOUT_TYPE = 1000
    BAD_ENV_VALUE = 1001
    INCOMPLETE_BASE_URI = 1002
    ID_MISSING_PROTOCOL = 1003
    LICENSE_MISSING_PROTOCOL = 1004
    MISSING_BASE_URI = 1005
    BAD_HANDLER_TYPE = 1006
    PROFILE_MISSING_PROTOCOL = 1007
    ECOM_MISSING_PROTOCOL = 1008


class SdkError(Exception):
    """Base exception for SDK errors"""

    def __init__(self, message: str, error_code: ErrorCode | None = None, details: dict | None = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
        self.message = message

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code.value}] {self.message}"
        return self.message


# Configuration Errors
class InvalidConfigurationError(SdkError, ValueError):
    """Raised when the SDK configuration bag is missing or has an invalid option"""

    def __init__(self, message: str, error_code: ErrorCode, details: dict | None = None):
        super().__init__(message, error_code, details)


# Request Errors
class ServiceRequestError(SdkError):
    """Raised when a service responds with an error status"""

    def __init__(self, status_code: int, message: str = "Service request failed", details: dict | None = None):
        self.status_code = status_code
        super().__init__(f"{message} ({status_code})", details=details)


class NetworkError(SdkError):
    """Raised when a request cannot be delivered to a service"""

    def __init__(self, message: str = "Network operation failed", details: dict | None = None):
        super().__init__(message, details=details)
