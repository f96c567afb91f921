"""
API configuration module.

Provides configuration for the RapidShare API client and downloader.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union, Tuple

DEFAULT_BASE_URL = 'https://api.rapidshare.com/cgi-bin/rsapi.cgi'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to the ``proxies`` mapping used by requests."""
        if not self.url:
            return None

        url = self.url
        if self.username and self.password and '://' in url:
            protocol, rest = url.split('://', 1)
            url = f"{protocol}://{self.username}:{self.password}@{rest}"

        return {'http': url, 'https': url}


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    ``verify=False`` skips certificate checks entirely.
    """
    verify: bool = True
    ca_file: Optional[str] = None
    cert_file: Optional[str] = None
    key_file: Optional[str] = None

    def to_requests_verify(self) -> Union[bool, str]:
        """Value for the ``verify`` argument of requests."""
        if not self.verify:
            return False
        return self.ca_file or True

    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Value for the ``cert`` argument of requests."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass
class TimeoutConfig:
    """Timeout configuration, in seconds."""
    connect: float = 30.0  # Connection timeout
    read: float = 60.0  # Socket read timeout

    def to_requests_timeout(self) -> Tuple[float, float]:
        """Convert to requests ``(connect, read)`` timeout tuple."""
        return (self.connect, self.read)


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes all configuration options for the RapidShare API client.
    """
    # Service endpoint
    base_url: str = DEFAULT_BASE_URL

    # User agent
    user_agent: str = 'rapidshare-py/0.5.3'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = 30  # logging.WARNING

    # Download settings
    chunk_size: int = 131072

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False),
            **kwargs
        )

    def get_session_headers(self) -> Dict[str, str]:
        """Headers installed on the requests session."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

    def get_request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments passed to every ``session.get`` call."""
        kwargs: Dict[str, Any] = {
            'timeout': self.timeout.to_requests_timeout(),
            'verify': self.ssl.to_requests_verify(),
        }

        cert = self.ssl.to_requests_cert()
        if cert:
            kwargs['cert'] = cert

        if self.proxy:
            proxies = self.proxy.to_requests_proxies()
            if proxies:
                kwargs['proxies'] = proxies

        return kwargs
