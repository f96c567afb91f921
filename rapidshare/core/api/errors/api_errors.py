"""RapidShare API error kinds and exceptions."""
from enum import Enum
from typing import Optional


ERROR_PREFIX = "ERROR: "


class APIErrorKind(Enum):
    """Closed set of failures the client can report."""

    LOGIN_FAILED = "Login failed"
    INVALID_ROUTINE = "Invalid routine called"
    API_ERROR = "api_error"
    CALLER_ERROR = "caller_error"
    TRANSPORT = "transport"


class RapidshareError(Exception):
    """Base exception for all RapidShare client errors."""

    kind: APIErrorKind = APIErrorKind.API_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationError(RapidshareError):
    """Invalid login, password or session cookie."""

    kind = APIErrorKind.LOGIN_FAILED

    def __init__(self, message: str = "Login failed") -> None:
        super().__init__(message)


class UnknownServiceError(RapidshareError):
    """The API does not know the requested service (``sub`` parameter)."""

    kind = APIErrorKind.INVALID_ROUTINE

    def __init__(self, service: str) -> None:
        self.service = service
        super().__init__(f"Invalid routine called: {service}")


class GenericApiError(RapidshareError):
    """Any other ``ERROR:`` response; carries the raw message."""

    kind = APIErrorKind.API_ERROR


class CallerError(RapidshareError):
    """A local precondition was violated before any request was sent."""

    kind = APIErrorKind.CALLER_ERROR


class TransportError(RapidshareError):
    """The HTTP request itself failed (connection error or bad status)."""

    kind = APIErrorKind.TRANSPORT

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


def error_from_message(message: str, service: str) -> RapidshareError:
    """
    Maps an API error message to its exception.

    Args:
        message: Error text with the ``ERROR: `` prefix and the trailing
            ``. (code)`` part already removed
        service: Service name of the failed request

    Returns:
        Exception instance matching the message
    """
    if message == APIErrorKind.LOGIN_FAILED.value:
        return AuthenticationError(message)
    if message == APIErrorKind.INVALID_ROUTINE.value:
        return UnknownServiceError(service)
    return GenericApiError(message)
