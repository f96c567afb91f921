"""Request building, sending and response decoding."""
from .request_handler import RequestHandler
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler, ResponseShape, ParsedResponse

__all__ = [
    'RequestHandler',
    'RequestBuilder',
    'ResponseHandler',
    'ResponseShape',
    'ParsedResponse',
]
