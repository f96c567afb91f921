"""
RapidshareClient - High-level client for the RapidShare API.

Example:
    >>> with RapidshareClient(login="user", password="secret") as rs:
    ...     for info in rs.check_files("https://rapidshare.com/files/829628035/HornyRhinos.jpg"):
    ...         print(info.file_name, info.status)
"""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    CookieInit,
    LoginInit,
    AnonymousInit,
    TokenInit,
    ResponseShape,
    CallerError,
    GenericApiError,
)
from .core.api.client import APIClient
from .core.download import Downloader, ProgressCallback
from .core.files import FileReference, FileStatusRecord, parse_file_reference
from .core.logging import get_logger


def _to_int(value: Optional[str]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _to_datetime(value: Optional[str]) -> Optional[datetime]:
    timestamp = _to_int(value)
    return datetime.fromtimestamp(timestamp) if timestamp else None


@dataclass
class AccountInfo:
    """
    RapidShare account information from ``getaccountdetails``.

    Attributes:
        account_id: Account id
        username: Login name
        email: Account email
        files: Number of stored files
        space_used: Storage used in bytes
        rapids: RapidPoints balance
        billed_until: End of the premium period
        raw: The full key-value response
    """
    account_id: str
    username: str
    email: str
    files: int = 0
    space_used: int = 0
    rapids: int = 0
    billed_until: Optional[datetime] = None
    raw: Optional[Dict[str, Optional[str]]] = None

    @classmethod
    def from_details(cls, details: Mapping[str, Optional[str]]) -> 'AccountInfo':
        return cls(
            account_id=details.get('accountid') or '',
            username=details.get('username') or '',
            email=details.get('email') or '',
            files=_to_int(details.get('curfiles')),
            space_used=_to_int(details.get('curspace')),
            rapids=_to_int(details.get('rapids')),
            billed_until=_to_datetime(details.get('billeduntil')),
            raw=dict(details)
        )

    @property
    def is_premium(self) -> bool:
        return self.billed_until is not None and self.billed_until > datetime.now()

    def __str__(self) -> str:
        return (
            f"Account: {self.username} ({self.account_id})\n"
            f"Files: {self.files}, {self.space_used / (1024 ** 2):.1f} MB used\n"
            f"RapidPoints: {self.rapids}"
        )


class RapidshareClient:
    """
    High-level client for RapidShare.

    Supports three modes:

    1. Session cookie (a single string argument is a cookie):
        >>> rs = RapidshareClient("F0EEB41B38363A41...")

    2. Premium account credentials:
        >>> rs = RapidshareClient(login="my_login", password="my_password")

    3. Free user, no session:
        >>> rs = RapidshareClient(free_user=True)
    """

    def __init__(
        self,
        cookie: Optional[str] = None,
        *,
        login: Optional[str] = None,
        password: Optional[str] = None,
        free_user: bool = False,
        config: Optional[APIConfig] = None,
        http_session=None
    ):
        """
        Initialize RapidShare client.

        Args:
            cookie: Existing session cookie
            login: Premium account login
            password: Premium account password
            free_user: Skip login entirely
            config: Optional API configuration
            http_session: Optional requests-compatible session
        """
        self._config = config or APIConfig.default()
        self._logger = get_logger('rapidshare.client')
        self._api = APIClient(
            self._token_init(cookie, login, password, free_user),
            self._config,
            http_session
        )
        self._downloader = Downloader(self._api.http_session, self._config)

    @staticmethod
    def _token_init(cookie: Optional[str], login: Optional[str],
                    password: Optional[str], free_user: bool) -> TokenInit:
        if free_user:
            return AnonymousInit()
        if cookie:
            return CookieInit(cookie)
        if login and password:
            return LoginInit(login, password)
        raise CallerError("Provide a cookie, login and password, or free_user=True")

    # =========================================================================
    # Configuration helpers
    # =========================================================================

    @staticmethod
    def create_config(
        proxy: Optional[str] = None,
        proxy_user: Optional[str] = None,
        proxy_pass: Optional[str] = None,
        timeout: float = 60,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None
    ) -> APIConfig:
        """
        Create API configuration with common options.

        Args:
            proxy: Proxy URL (e.g., "http://proxy:8080")
            proxy_user: Proxy username
            proxy_pass: Proxy password
            timeout: Read timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            user_agent: Custom user agent string

        Returns:
            APIConfig instance
        """
        proxy_config = None
        if proxy:
            proxy_config = ProxyConfig(
                url=proxy,
                username=proxy_user,
                password=proxy_pass
            )

        config = APIConfig(
            proxy=proxy_config,
            timeout=TimeoutConfig(read=timeout),
            ssl=SSLConfig(verify=verify_ssl)
        )
        if user_agent:
            config.user_agent = user_agent
        return config

    # =========================================================================
    # Session
    # =========================================================================

    @property
    def api(self) -> APIClient:
        """Underlying API client."""
        return self._api

    @property
    def cookie(self) -> Optional[str]:
        """Session cookie (resolved on first call)."""
        return self._api.cookie

    @property
    def is_logged_in(self) -> bool:
        return self._api.cookie is not None

    def connect(self) -> 'RapidshareClient':
        """Resolves the session cookie."""
        self._api.connect()
        return self

    def close(self):
        """Close the client and release resources."""
        self._api.close()

    def __enter__(self) -> 'RapidshareClient':
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # =========================================================================
    # Service calls
    # =========================================================================

    def call(self, service: str, params: Optional[Mapping[str, Any]] = None,
             shape: Union[ResponseShape, str, None] = ResponseShape.RAW):
        """Calls any RapidShare service (see ``APIClient.call``)."""
        return self._api.call(service, params, shape)

    request = call

    def get_account_details(self) -> Dict[str, Optional[str]]:
        """Returns account details as a dict."""
        return self._api.get_account_details()

    def get_account_info(self) -> AccountInfo:
        """Returns account details as AccountInfo."""
        return AccountInfo.from_details(self._api.get_account_details())

    def get_rapid_trans_logs(self) -> List[List[str]]:
        """Returns the RapidPoints transaction log."""
        return self._api.get_rapid_trans_logs()

    def check_files(self, *files: Union[str, FileReference, List[Union[str, FileReference]]]) -> List[FileStatusRecord]:
        """
        Retrieves information about files.

        Accepts ``check_files(file1)``, ``check_files(file1, file2)`` or
        ``check_files([file1, file2])``.
        """
        refs: List[Union[str, FileReference]] = []
        for item in files:
            if isinstance(item, (list, tuple)):
                refs.extend(item)
            else:
                refs.append(item)
        return self._api.check_files(refs)

    # =========================================================================
    # Download
    # =========================================================================

    def download(
        self,
        file: Union[str, FileReference, FileStatusRecord],
        dest_path: Union[str, Path] = ".",
        filename: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Path:
        """
        Download a file from RapidShare.

        Args:
            file: File link, FileReference, or a FileStatusRecord from
                ``check_files`` (no further status check is made)
            dest_path: Destination directory
            filename: Name to save under (default: name from the link)
            progress_callback: Optional callback(downloaded_bytes, total_bytes)

        Returns:
            Path to downloaded file

        Raises:
            GenericApiError: If the file cannot be downloaded
            CallerError: If the file name is empty or unsafe
        """
        if isinstance(file, FileStatusRecord):
            info = file
        else:
            records = self._api.check_files(file)
            info = records[0] if records else None
        if info is None or not info.is_ok:
            raise GenericApiError(f"File not available: {file}")

        if not filename:
            filename = info.file_name
            if not filename and not isinstance(file, FileStatusRecord):
                filename = parse_file_reference(file).file_name

        self._logger.info("Downloading %s from %s", info.file_name, info.download_url)
        return self._downloader.download(
            info.download_url,
            dest_path,
            filename,
            progress_callback
        )
