"""RapidShare API module.

The client lives in ``rapidshare.core.api.client`` and is imported from
there, since it depends on ``rapidshare.core.files``.
"""
from .errors import (
    ERROR_PREFIX,
    APIErrorKind,
    RapidshareError,
    AuthenticationError,
    UnknownServiceError,
    GenericApiError,
    CallerError,
    TransportError,
)
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, DEFAULT_BASE_URL
from .request import RequestBuilder, RequestHandler, ResponseHandler, ResponseShape
from .session import (
    SessionFactory,
    SessionManager,
    SessionState,
    TokenInit,
    CookieInit,
    LoginInit,
    AnonymousInit,
)

__all__ = [
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_BASE_URL',

    # Requests
    'RequestBuilder',
    'RequestHandler',
    'ResponseHandler',
    'ResponseShape',

    # Sessions
    'SessionFactory',
    'SessionManager',
    'SessionState',
    'TokenInit',
    'CookieInit',
    'LoginInit',
    'AnonymousInit',

    # Errors
    'ERROR_PREFIX',
    'APIErrorKind',
    'RapidshareError',
    'AuthenticationError',
    'UnknownServiceError',
    'GenericApiError',
    'CallerError',
    'TransportError',
]
