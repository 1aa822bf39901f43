"""
Transport protocols.

Any object with a matching ``send`` can replace the bundled transports,
e.g. a stub in tests.
"""
from typing import Protocol, runtime_checkable

from ..request import HttpRequest, HttpResponse


@runtime_checkable
class Transport(Protocol):
    """Blocking transport."""
    
    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request and return the raw response.
        
        Raises the underlying HTTP library's exception on network failure.
        HTTP error statuses are returned, not raised.
        """
        ...
    
    def close(self) -> None:
        ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Asynchronous transport."""
    
    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send a request and return the raw response."""
        ...
    
    async def close(self) -> None:
        ...
