"""
MeiliPy - Python client for the Meilisearch document API.

Usage:
    >>> from meilipy import MeiliClient
    >>> 
    >>> with MeiliClient("http://localhost:7700") as client:
    ...     movies = client.index("movies")
    ...     update = movies.add_documents([{"id": "1", "title": "Carol"}])
    ...     movies.wait_for_update(update.update_id)
    ...     print(movies.search("carol").hits)
"""
import logging
from .client import MeiliClient, AsyncMeiliClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    ServiceTemplate,
    AsyncServiceTemplate,
    RequestFactory,
)

# Documents
from .core.documents import (
    DocumentHandler,
    AsyncDocumentHandler,
    Update,
    SearchRequest,
    SearchResponse,
)
from .core.serialization import DocumentCodec, JsonProcessor

# Errors
from .core.exceptions import (
    MeiliSearchError,
    MeiliSearchTransportError,
    MeiliSearchApiError,
    MeiliSearchEncodeError,
    MeiliSearchDecodeError,
    MeiliSearchTimeoutError,
)

__version__ = '0.1.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for meilipy modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'meilipy',
        'meilipy.client',
        'meilipy.api',
        'meilipy.transport',
        'meilipy.documents',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'MeiliClient',
    'AsyncMeiliClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'ServiceTemplate',
    'AsyncServiceTemplate',
    'RequestFactory',
    'DocumentHandler',
    'AsyncDocumentHandler',
    'DocumentCodec',
    'JsonProcessor',
    'Update',
    'SearchRequest',
    'SearchResponse',
    'MeiliSearchError',
    'MeiliSearchTransportError',
    'MeiliSearchApiError',
    'MeiliSearchEncodeError',
    'MeiliSearchDecodeError',
    'MeiliSearchTimeoutError',
    'setup_logging',
]
