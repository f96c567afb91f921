"""
Session initialisation models.

A client starts from exactly one of these.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class CookieInit:
    """Start from an existing session cookie."""
    cookie: str


@dataclass(frozen=True)
class LoginInit:
    """Exchange premium account credentials for a session cookie."""
    login: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AnonymousInit:
    """Free user: no session, calls carry no cookie."""


TokenInit = Union[CookieInit, LoginInit, AnonymousInit]


class SessionState(Enum):
    """Lifecycle of a session token."""
    UNRESOLVED = 'unresolved'
    RESOLVING = 'resolving'
    RESOLVED = 'resolved'
    FAILED = 'failed'
