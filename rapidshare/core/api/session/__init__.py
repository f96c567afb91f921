"""HTTP sessions and session cookie resolution."""
from .session_factory import SessionFactory
from .session_manager import SessionManager, ACCOUNT_DETAILS_SERVICE
from .models import TokenInit, CookieInit, LoginInit, AnonymousInit, SessionState

__all__ = [
    'SessionFactory',
    'SessionManager',
    'ACCOUNT_DETAILS_SERVICE',
    'TokenInit',
    'CookieInit',
    'LoginInit',
    'AnonymousInit',
    'SessionState',
]
