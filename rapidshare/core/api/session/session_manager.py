"""Session cookie resolution."""
import threading
from typing import Optional

from .models import TokenInit, CookieInit, LoginInit, AnonymousInit, SessionState
from ..errors import (
    AuthenticationError,
    CallerError,
    GenericApiError,
    RapidshareError,
    UnknownServiceError,
)
from ..request import RequestHandler, RequestBuilder, ResponseShape
from ...logging import get_logger, mask_cookie

ACCOUNT_DETAILS_SERVICE = 'getaccountdetails'


class SessionManager:
    """
    Resolves the session cookie used to sign service calls.

    Resolution runs at most once. After success the cookie is reused for
    every call; after failure the same error is raised again without
    contacting the API.
    """

    def __init__(self, request_handler: RequestHandler, base_url: str, init: TokenInit):
        """Initializes session manager."""
        if not isinstance(init, (CookieInit, LoginInit, AnonymousInit)):
            raise CallerError(f"Unsupported session init: {init!r}")
        self.request_handler = request_handler
        self.base_url = base_url
        self.init = init
        self.state = SessionState.UNRESOLVED
        self._cookie: Optional[str] = None
        self._error: Optional[RapidshareError] = None
        self._lock = threading.Lock()
        self.logger = get_logger('rapidshare.session')

    @property
    def cookie(self) -> Optional[str]:
        """Resolved cookie, or None if unresolved or anonymous."""
        return self._cookie

    @property
    def is_resolved(self) -> bool:
        return self.state is SessionState.RESOLVED

    def resolve(self) -> Optional[str]:
        """
        Resolves the session cookie.

        Returns:
            The cookie, or None for anonymous sessions

        Raises:
            AuthenticationError: If the cookie or credentials are rejected
        """
        with self._lock:
            if self.state is SessionState.RESOLVED:
                return self._cookie
            if self.state is SessionState.FAILED:
                raise self._error

            self.state = SessionState.RESOLVING
            try:
                cookie = self._resolve()
            except RapidshareError as e:
                self.state = SessionState.FAILED
                self._error = e
                self.logger.warning("Session resolution failed: %s", e)
                raise

            self._cookie = cookie
            self.state = SessionState.RESOLVED
            return cookie

    def _resolve(self) -> Optional[str]:
        if isinstance(self.init, AnonymousInit):
            self.logger.info("Using anonymous (free user) session")
            return None

        if isinstance(self.init, CookieInit):
            return self._validate_cookie(self.init.cookie)

        return self._login(self.init.login, self.init.password)

    def _validate_cookie(self, cookie: str) -> str:
        if not cookie:
            raise AuthenticationError("Empty session cookie")

        # Only a rejected login invalidates the cookie.
        try:
            self.request_handler.execute(
                RequestBuilder(self.base_url, cookie),
                ACCOUNT_DETAILS_SERVICE
            )
        except (GenericApiError, UnknownServiceError) as e:
            self.logger.debug("Ignoring %s while validating cookie", e)
        self.logger.info("Session cookie %s accepted", mask_cookie(cookie))
        return cookie

    def _login(self, login: str, password: str) -> str:
        details = self.request_handler.execute(
            RequestBuilder(self.base_url),
            ACCOUNT_DETAILS_SERVICE,
            {'login': login, 'password': password, 'withcookie': 1},
            ResponseShape.KEY_VALUE_MAP
        )

        cookie = details.get('cookie')
        if not cookie:
            raise AuthenticationError("No session cookie in account details")

        self.logger.info("Logged in as %s", login)
        return cookie
