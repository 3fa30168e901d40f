"""EmailListVerify SDK Exceptions."""

from typing import Any, Optional


class EmailListVerifyError(Exception):
    """Base exception for all EmailListVerify errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        status_code: int = 0,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(EmailListVerifyError):
    """Raised when the client is constructed with a missing or invalid setting."""

    def __init__(self, message: str = "API key is required") -> None:
        super().__init__(message, "CONFIGURATION_ERROR")


class ValidationError(EmailListVerifyError):
    """Raised when a required argument is empty or malformed."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", 0, details)


class NotFoundError(EmailListVerifyError):
    """Raised when a local file or a tracked job does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NOT_FOUND")


class RequestError(EmailListVerifyError):
    """Raised on transport failures, non-2xx responses and failed bulk jobs."""

    def __init__(
        self,
        message: str,
        code: str = "REQUEST_ERROR",
        status_code: int = 0,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code, status_code, details)


class ProtocolError(EmailListVerifyError):
    """Raised when a response does not have any of the expected shapes."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, "PROTOCOL_ERROR", 0, details)


class TimeoutError(EmailListVerifyError):
    """Raised when a bulk job does not reach a terminal state in time."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "TIMEOUT")
