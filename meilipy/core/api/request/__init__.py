"""Request building and response handling."""
from .http_request import HttpMethod, HttpRequest, HttpResponse
from .request_factory import RequestFactory
from .response_handler import ResponseHandler

__all__ = [
    'HttpMethod',
    'HttpRequest',
    'HttpResponse',
    'RequestFactory',
    'ResponseHandler',
]
