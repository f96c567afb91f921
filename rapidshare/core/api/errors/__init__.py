"""RapidShare API errors and exceptions."""
from .api_errors import (
    ERROR_PREFIX,
    APIErrorKind,
    RapidshareError,
    AuthenticationError,
    UnknownServiceError,
    GenericApiError,
    CallerError,
    TransportError,
    error_from_message,
)

__all__ = [
    'ERROR_PREFIX',
    'APIErrorKind',
    'RapidshareError',
    'AuthenticationError',
    'UnknownServiceError',
    'GenericApiError',
    'CallerError',
    'TransportError',
    'error_from_message',
]
