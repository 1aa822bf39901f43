"""
Service templates.

Run a request through a transport and turn the response into a typed
result. These are the only places where library exceptions raised
while sending or decoding become MeiliSearchError subclasses.
"""
import asyncio
from typing import Any, Callable, Optional, TypeVar

import aiohttp
import requests

from .request import HttpRequest, HttpResponse, ResponseHandler
from .transport import Transport, AsyncTransport
from ..exceptions import (
    MeiliSearchError,
    MeiliSearchTransportError,
    MeiliSearchDecodeError,
)
from ..logging import get_logger
from ..serialization import JsonProcessor, Processor

R = TypeVar('R')

TRANSPORT_ERRORS = (
    requests.RequestException,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


class _BaseServiceTemplate:
    """Response handling shared by the sync and async templates."""
    
    def __init__(self, processor: Optional[Processor] = None):
        self._processor = processor or JsonProcessor()
        self._logger = get_logger('meilipy.api')
    
    @property
    def processor(self) -> Processor:
        """Encoder/decoder used for bodies."""
        return self._processor
    
    def _transport_error(self, request: HttpRequest, error: Exception) -> MeiliSearchTransportError:
        self._logger.error(f"{request.method.value} {request.path} failed: {error}")
        return MeiliSearchTransportError(f"Request failed: {error}", cause=error)
    
    def _handle_response(
        self,
        request: HttpRequest,
        response: HttpResponse,
        target: Optional[Callable[[Any], R]]
    ) -> R:
        error = ResponseHandler.handle_error(response)
        if error:
            self._logger.error(f"{request.method.value} {request.path} returned {error}")
            raise error
        
        try:
            payload = self._processor.decode(response.text)
            return target(payload) if target else payload
        except MeiliSearchError:
            raise
        except Exception as e:
            self._logger.error(f"Cannot decode response of {request.method.value} {request.path}: {e}")
            raise MeiliSearchDecodeError(f"Invalid response body: {e}", cause=e) from e


class ServiceTemplate(_BaseServiceTemplate):
    """
    Executes requests on a blocking transport.
    
    Example:
        >>> template = ServiceTemplate(RequestsTransport(config))
        >>> update = template.execute(request, Update.from_dict)
    """
    
    def __init__(self, transport: Transport, processor: Optional[Processor] = None):
        super().__init__(processor)
        self._transport = transport
    
    @property
    def transport(self) -> Transport:
        return self._transport
    
    def execute(self, request: HttpRequest, target: Optional[Callable[[Any], R]] = None) -> R:
        """
        Send a request and decode its response.
        
        Args:
            request: Request descriptor
            target: Maps the decoded JSON value to the result
                    (the raw value is returned when omitted)
        
        Raises:
            MeiliSearchTransportError: Network failure
            MeiliSearchApiError: Error status from the server
            MeiliSearchDecodeError: Invalid body or target mapping failure
        """
        try:
            response = self._transport.send(request)
        except MeiliSearchError:
            raise
        except TRANSPORT_ERRORS as e:
            raise self._transport_error(request, e) from e
        return self._handle_response(request, response, target)
    
    def close(self) -> None:
        self._transport.close()


class AsyncServiceTemplate(_BaseServiceTemplate):
    """Executes requests on an asynchronous transport."""
    
    def __init__(self, transport: AsyncTransport, processor: Optional[Processor] = None):
        super().__init__(processor)
        self._transport = transport
    
    @property
    def transport(self) -> AsyncTransport:
        return self._transport
    
    async def execute(self, request: HttpRequest, target: Optional[Callable[[Any], R]] = None) -> R:
        """Send a request and decode its response (see ServiceTemplate.execute)."""
        try:
            response = await self._transport.send(request)
        except MeiliSearchError:
            raise
        except TRANSPORT_ERRORS as e:
            raise self._transport_error(request, e) from e
        return self._handle_response(request, response, target)
    
    async def close(self) -> None:
        await self._transport.close()
