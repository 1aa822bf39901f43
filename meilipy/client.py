"""
High-level clients.

Own the configuration, the transport and the service template, and hand
out document handlers bound to one index.
"""
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, TypeVar

from .core.api import (
    APIConfig,
    ServiceTemplate,
    AsyncServiceTemplate,
    RequestsTransport,
    AiohttpTransport,
    Transport,
    AsyncTransport,
)
from .core.documents import DocumentHandler, AsyncDocumentHandler
from .core.logging import get_logger
from .core.serialization import DocumentCodec, Processor

T = TypeVar('T')


class MeiliClient:
    """
    Blocking Meilisearch client.
    
    Example:
        >>> with MeiliClient('http://localhost:7700', api_key='masterKey') as client:
        ...     movies = client.index('movies')
        ...     movies.add_documents([{'id': '1', 'title': 'Carol'}])
    """
    
    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        config: Optional[APIConfig] = None,
        transport: Optional[Transport] = None,
        processor: Optional[Processor] = None
    ):
        """
        Initialize the client.
        
        Args:
            host: Server URL (overrides config.host)
            api_key: API key (overrides config.api_key)
            config: Full configuration (defaults used if not provided)
            transport: Custom transport (a RequestsTransport by default)
            processor: Custom JSON encoder/decoder
        """
        self._config = _merge_config(config, host, api_key)
        self._transport = transport or RequestsTransport(self._config)
        self._template = ServiceTemplate(self._transport, processor)
        self._logger = get_logger('meilipy.client')
        # Only set level if basicConfig was not called
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
        self._logger.debug(f"Client created for {self._config.host}")
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    @property
    def service_template(self) -> ServiceTemplate:
        return self._template
    
    def index(self, name: str, codec: Optional[DocumentCodec[T]] = None) -> DocumentHandler[T]:
        """
        Get a handler for the documents of an index.
        
        Args:
            name: Index name (uid)
            codec: Maps documents to/from JSON (plain dicts by default)
        """
        return DocumentHandler(self._template, name, codec)
    
    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._template.close()
    
    def __enter__(self) -> 'MeiliClient':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncMeiliClient:
    """
    Asynchronous Meilisearch client.
    
    Example:
        >>> async with AsyncMeiliClient('http://localhost:7700') as client:
        ...     hits = (await client.index('movies').search('carol')).hits
    """
    
    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        config: Optional[APIConfig] = None,
        transport: Optional[AsyncTransport] = None,
        processor: Optional[Processor] = None
    ):
        self._config = _merge_config(config, host, api_key)
        self._transport = transport or AiohttpTransport(self._config)
        self._template = AsyncServiceTemplate(self._transport, processor)
        self._logger = get_logger('meilipy.client')
        # Only set level if basicConfig was not called
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    def index(self, name: str, codec: Optional[DocumentCodec[T]] = None) -> AsyncDocumentHandler[T]:
        return AsyncDocumentHandler(self._template, name, codec)
    
    async def close(self) -> None:
        await self._template.close()
    
    async def __aenter__(self) -> 'AsyncMeiliClient':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _merge_config(config: Optional[APIConfig], host: Optional[str], api_key: Optional[str]) -> APIConfig:
    overrides: Dict[str, Any] = {}
    if host:
        overrides['host'] = host
    if api_key:
        overrides['api_key'] = api_key
    if config is None:
        return APIConfig(**overrides)
    if overrides:
        return replace(config, **overrides)
    return config
