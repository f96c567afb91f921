"""Request builder for API requests."""
from urllib.parse import urlencode
from typing import Any, List, Mapping, Optional, Tuple


class RequestBuilder:
    """Builds signed GET URLs for RapidShare service calls."""

    def __init__(self, base_url: str, cookie: Optional[str] = None):
        """Initializes request builder."""
        self.base_url = base_url
        self.cookie = cookie

    def build_params(self, service: str,
                     params: Optional[Mapping[str, Any]] = None) -> List[Tuple[str, str]]:
        """Builds the ordered query parameters for a service call."""
        query = [('sub', service)]
        caller_cookie = None

        for key, value in (params or {}).items():
            if value is None:
                continue
            if key == 'cookie':
                caller_cookie = str(value)
                continue
            query.append((key, str(value)))

        # The session cookie replaces any cookie passed by the caller.
        cookie = self.cookie or caller_cookie
        if cookie:
            query.append(('cookie', cookie))

        return query

    def build_url(self, service: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Builds request URL."""
        return f"{self.base_url}?{urlencode(self.build_params(service, params))}"
