"""Response handler for API responses."""
import re
from enum import Enum
from typing import Dict, List, Optional, Union

from ..errors import ERROR_PREFIX, CallerError, error_from_message

LINE_SPLIT = re.compile(r'\s*\n\s*')

ParsedResponse = Union[str, List[List[str]], Dict[str, Optional[str]]]


class ResponseShape(Enum):
    """How a response body is decoded."""

    RAW = 'raw'
    DELIMITED_ROWS = 'csv'
    KEY_VALUE_MAP = 'hash'

    @classmethod
    def coerce(cls, shape: Union['ResponseShape', str, None]) -> 'ResponseShape':
        """Accepts a member, its value, or None (meaning RAW)."""
        if shape is None:
            return cls.RAW
        if isinstance(shape, cls):
            return shape
        try:
            return cls(str(shape).lower())
        except ValueError:
            raise CallerError(f"Invalid response shape: {shape!r}") from None


def split_lines(body: str) -> List[str]:
    """Splits a body into lines, ignoring whitespace around each line."""
    body = (body or '').strip()
    if not body:
        return []
    return LINE_SPLIT.split(body)


class ResponseHandler:
    """Handles API responses."""

    @staticmethod
    def handle_error(body: str, service: str) -> None:
        """
        Raises the matching exception if the body is an error response.

        Args:
            body: Raw response body
            service: Name of the requested service

        Raises:
            AuthenticationError: On ``ERROR: Login failed.``
            UnknownServiceError: On ``ERROR: Invalid routine called.``
            GenericApiError: On any other ``ERROR:`` body
        """
        if not body.startswith(ERROR_PREFIX):
            return
        message = body[len(ERROR_PREFIX):].split('.', 1)[0]
        raise error_from_message(message, service)

    @staticmethod
    def parse_rows(body: str) -> List[List[str]]:
        """Parses comma-separated lines into rows of fields."""
        return [line.split(',') for line in split_lines(body)]

    @staticmethod
    def parse_key_values(body: str) -> Dict[str, Optional[str]]:
        """
        Parses ``key=value`` lines into a dict.

        Later keys overwrite earlier ones. A key without a value maps to None.
        """
        result: Dict[str, Optional[str]] = {}
        for line in split_lines(body):
            key, _, value = line.partition('=')
            result[key] = value or None
        return result

    @classmethod
    def parse_response(cls, body: str,
                       shape: Union[ResponseShape, str, None] = ResponseShape.RAW) -> ParsedResponse:
        """Decodes a successful response body into the requested shape."""
        shape = ResponseShape.coerce(shape)
        if shape is ResponseShape.DELIMITED_ROWS:
            return cls.parse_rows(body)
        if shape is ResponseShape.KEY_VALUE_MAP:
            return cls.parse_key_values(body)
        return body or ''

    @classmethod
    def process_response(cls, body: str, service: str,
                         shape: Union[ResponseShape, str, None] = ResponseShape.RAW) -> ParsedResponse:
        """Classifies the body, then parses it."""
        cls.handle_error(body, service)
        return cls.parse_response(body, shape)
