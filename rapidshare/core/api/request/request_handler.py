"""Request handler performing the HTTP round trip."""
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .request_builder import RequestBuilder
from .response_handler import ResponseHandler, ResponseShape, ParsedResponse
from ..errors import TransportError, RapidshareError
from ...logging import get_logger, mask_cookie


class RequestHandler:
    """Sends service calls and hands the body to ResponseHandler."""

    def __init__(self, session: requests.Session,
                 request_kwargs: Optional[Dict[str, Any]] = None):
        """Initializes request handler."""
        self.session = session
        self.request_kwargs = request_kwargs or {}
        self.logger = get_logger('rapidshare.request')

    def fetch(self, url: str) -> str:
        """Performs the GET and returns the body text."""
        try:
            response = self.session.get(url, **self.request_kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"HTTP {status} for API request", url, status) from e
        except requests.RequestException as e:
            raise TransportError(f"API request failed: {e}", url) from e
        return response.text

    def execute(self, builder: RequestBuilder, service: str,
                params: Optional[Mapping[str, Any]] = None,
                shape: Union[ResponseShape, str, None] = ResponseShape.RAW) -> ParsedResponse:
        """Executes a service call and returns the parsed body."""
        shape = ResponseShape.coerce(shape)
        url = builder.build_url(service, params)
        self.logger.debug(
            "GET sub=%s params=%s cookie=%s",
            service, sorted(k for k in (params or {}) if k not in ('password', 'cookie')),
            mask_cookie(builder.cookie or '')
        )

        body = self.fetch(url)

        try:
            return ResponseHandler.process_response(body, service, shape)
        except RapidshareError as e:
            self.logger.warning("Service %s failed: %s", service, e)
            raise
