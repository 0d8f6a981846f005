"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
All of them propagate to the single handler in rpadmin.cli.app, which
prints the message and exits non-zero.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when settings are missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIG_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when an admin server call fails."""

    def __init__(
        self,
        message: str = "External service error",
        code: str = "SYS_EXTERNAL_SERVICE_ERROR",
    ) -> None:
        super().__init__(message, code=code)


class ServerUnreachableError(ExternalServiceError):
    """Raised on transport failures: connection refused, DNS, timeout."""

    def __init__(self, message: str = "Admin server is unreachable") -> None:
        super().__init__(message, code="SRV_UNREACHABLE")


class ResponseDecodeError(ExternalServiceError):
    """Raised when a response body is not JSON of the expected shape."""

    def __init__(self, message: str = "Malformed response from admin server") -> None:
        super().__init__(message, code="SRV_BAD_RESPONSE")


class UnexpectedStatusError(ExternalServiceError):
    """Raised when the admin server answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message, code="SRV_BAD_STATUS")
