"""RapidShare API client using composition."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..config import APIConfig
from ..errors import CallerError
from ..request import RequestHandler, RequestBuilder, ResponseShape, ParsedResponse
from ..session import (
    SessionFactory,
    SessionManager,
    ACCOUNT_DETAILS_SERVICE,
    TokenInit,
    AnonymousInit,
)
from ...files import FileReference, FileStatusRecord, FileStatusResolver
from ...logging import get_logger


class APIClient:
    """
    RapidShare API client.

    Every call is a blocking GET. The session cookie is resolved on first
    use (or by ``connect()``) and then reused for all calls.

    Example:
        >>> api = APIClient(CookieInit('F0EEB41B...'))
        >>> api.get_account_details()['username']
        'valid_account'
    """

    def __init__(self, init: Optional[TokenInit] = None,
                 config: Optional[APIConfig] = None, http_session=None):
        """
        Initializes API client.

        Args:
            init: How to obtain the session cookie (anonymous if omitted)
            config: API configuration (uses defaults if not provided)
            http_session: requests-compatible session (created if omitted)
        """
        self._config = config or APIConfig.default()
        self._owns_session = http_session is None
        self.http_session = http_session or SessionFactory.create_sync_session(
            self._config.get_session_headers()
        )
        self.request_handler = RequestHandler(
            self.http_session,
            self._config.get_request_kwargs()
        )
        self.session_manager = SessionManager(
            self.request_handler,
            self._config.base_url,
            init or AnonymousInit()
        )
        self.file_status_resolver = FileStatusResolver(self)
        self.closed = False

        self.logger = get_logger('rapidshare.api')
        self.logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def cookie(self) -> Optional[str]:
        """Resolved session cookie (None before resolution or for free users)."""
        return self.session_manager.cookie

    def connect(self) -> Optional[str]:
        """Resolves the session cookie now instead of on the first call."""
        return self.session_manager.resolve()

    def call(self, service: str, params: Optional[Mapping[str, Any]] = None,
             shape: Union[ResponseShape, str, None] = ResponseShape.RAW) -> ParsedResponse:
        """
        Calls a RapidShare service and returns the parsed result.

        Args:
            service: Service name, for example ``checkfiles``
            params: Service parameters
            shape: How to parse the body: ``raw`` (text as is), ``csv``
                (list of rows) or ``hash`` (dict of ``key=value`` lines)

        Raises:
            CallerError: If the client is closed or the shape is invalid
            AuthenticationError: If the session cannot be resolved
            UnknownServiceError: If the service does not exist
            GenericApiError: For any other API error
        """
        if self.closed:
            raise CallerError("API client is closed")
        if not service:
            raise CallerError("Service name is required")

        shape = ResponseShape.coerce(shape)
        cookie = self.session_manager.resolve()
        builder = RequestBuilder(self._config.base_url, cookie)
        return self.request_handler.execute(builder, service, params, shape)

    request = call

    def get_account_details(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Optional[str]]:
        """Returns account details."""
        return self.call(ACCOUNT_DETAILS_SERVICE, params, ResponseShape.KEY_VALUE_MAP)

    def get_rapid_trans_logs(self, params: Optional[Mapping[str, Any]] = None) -> List[List[str]]:
        """Returns the RapidPoints transaction log, one row per transaction."""
        return self.call('getrapidtranslogs', params, ResponseShape.DELIMITED_ROWS)

    def check_files(self, refs: Union[str, FileReference, Iterable[Union[str, FileReference]]]) -> List[FileStatusRecord]:
        """Retrieves status information about files."""
        return self.file_status_resolver.check(refs)

    def close(self):
        """Closes the HTTP session if this client created it."""
        self.closed = True
        if self._owns_session and self.http_session is not None:
            self.http_session.close()

    def __enter__(self) -> 'APIClient':
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
