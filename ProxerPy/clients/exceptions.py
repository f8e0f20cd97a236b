"""
Proxer Client Exceptions

Closed error taxonomy for request construction and dispatch. Every error carries
an ErrorKind so callers (and the dispatcher itself) can branch on the category
without depending on the concrete exception class.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Category of a client failure"""
    INVALID_PARAMETERS = "invalid_parameters"
    UNEXPECTED_RESPONSE = "unexpected_response"
    TRANSPORT_FAILURE = "transport_failure"
    AUTHENTICATION_FAILED = "authentication_failed"
    UNKNOWN = "unknown"


class ProxerError(Exception):
    """Base exception for all Proxer client errors"""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or API responses."""
        return {"error_code": self.kind.value, "message": self.message, "details": self.details}


class InvalidParametersError(ProxerError):
    """Raised when structurally malformed input reaches a builder function"""

    kind = ErrorKind.INVALID_PARAMETERS

    def __init__(self, message: str = "Invalid parameters", **kwargs):
        super().__init__(message, **kwargs)


class UnexpectedResponseError(ProxerError):
    """Raised when the API answered with a non-200 status or a non-object body"""

    kind = ErrorKind.UNEXPECTED_RESPONSE

    def __init__(self, response: Any, message: Optional[str] = None, **kwargs):
        status_code = getattr(response, "status_code", None)
        super().__init__(message or f"Unexpected response: {status_code}", **kwargs)
        self.response = response
        self.details.setdefault("status_code", status_code)

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class TransportFailureError(ProxerError):
    """Raised when the request never produced an HTTP response"""

    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, error: BaseException, message: Optional[str] = None, **kwargs):
        super().__init__(message or f"Transport failure: {error}", **kwargs)
        self.error = error
        self.details.setdefault("error_type", type(error).__name__)


class AuthenticationError(ProxerError):
    """Raised when the login flow did not yield a login token"""

    kind = ErrorKind.AUTHENTICATION_FAILED

    def __init__(self, message: str = "Authentication failed", response: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.response = response


class UnknownError(ProxerError):
    """Raised for internal invariant violations during dispatch"""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str = "Unknown error", **kwargs):
        super().__init__(message, **kwargs)
