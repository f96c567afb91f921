"""
rapidshare - Python client for the RapidShare API.

Usage:
    >>> from rapidshare import RapidshareClient
    >>>
    >>> with RapidshareClient(login="user", password="secret") as rs:
    ...     print(rs.get_account_details()['username'])
"""
import logging
from .client import RapidshareClient, AccountInfo

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    ResponseShape,
    CookieInit,
    LoginInit,
    AnonymousInit,
)
from .core.api.client import APIClient

# Errors
from .core.api.errors import (
    APIErrorKind,
    RapidshareError,
    AuthenticationError,
    UnknownServiceError,
    GenericApiError,
    CallerError,
    TransportError,
)

# Files
from .core.files import (
    FileReference,
    FileStatus,
    FileStatusRecord,
    build_file_url,
    parse_file_reference,
)

__version__ = '0.5.3'


def setup_logging(level=logging.INFO):
    """
    Configure logging for rapidshare modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'rapidshare',
        'rapidshare.api',
        'rapidshare.client',
        'rapidshare.request',
        'rapidshare.session',
        'rapidshare.files',
        'rapidshare.download',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RapidshareClient',
    'AccountInfo',
    'APIClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'ResponseShape',
    'CookieInit',
    'LoginInit',
    'AnonymousInit',
    'APIErrorKind',
    'RapidshareError',
    'AuthenticationError',
    'UnknownServiceError',
    'GenericApiError',
    'CallerError',
    'TransportError',
    'FileReference',
    'FileStatus',
    'FileStatusRecord',
    'build_file_url',
    'parse_file_reference',
    'setup_logging',
]
