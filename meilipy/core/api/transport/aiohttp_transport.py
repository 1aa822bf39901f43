"""Asynchronous transport built on aiohttp."""
from typing import Optional

import aiohttp

from ..config import APIConfig
from ..request import HttpRequest, HttpResponse
from ..session import SessionFactory
from ...logging import get_logger, truncate


class AiohttpTransport:
    """
    Sends requests through a lazily created aiohttp.ClientSession.
    
    Example:
        >>> async with AiohttpTransport(APIConfig()) as transport:
        ...     response = await transport.send(request)
    """
    
    def __init__(self, config: Optional[APIConfig] = None):
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = get_logger('meilipy.transport')
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    async def __aenter__(self) -> 'AiohttpTransport':
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = SessionFactory.create_async_session(self._config)
        return self._session
    
    async def send(self, request: HttpRequest) -> HttpResponse:
        session = await self._ensure_session()
        url = self._config.build_url(request.path)
        
        self._logger.debug(f"{request.method.value} {url}")
        if request.body is not None:
            self._logger.debug(f"Request data: {truncate(request.body, 300)}")
        
        async with session.request(
            request.method.value,
            url,
            data=request.body.encode('utf-8') if request.body is not None else None,
            headers=request.headers or None,
            proxy=self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
        ) as response:
            text = self._decode_body(await response.read(), response.charset)
            self._logger.debug(f"Response {response.status}: {truncate(text)}")
            return HttpResponse(
                status_code=response.status,
                text=text,
                headers=dict(response.headers)
            )
    
    @staticmethod
    def _decode_body(body: bytes, charset: Optional[str]) -> str:
        """Decode with replacement, like requests does for Response.text."""
        try:
            return body.decode(charset or 'utf-8', errors='replace')
        except LookupError:
            return body.decode('utf-8', errors='replace')
    
    async def close(self) -> None:
        """Close the session and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
