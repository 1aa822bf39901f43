"""Document and search operations."""
from .models import Update, SearchRequest, SearchResponse
from .handler import DocumentHandler, AsyncDocumentHandler

__all__ = [
    'Update',
    'SearchRequest',
    'SearchResponse',
    'DocumentHandler',
    'AsyncDocumentHandler',
]
