"""
Document and search operations on a single index.

Each operation builds a path, hands an HttpRequest to the service
template and maps the decoded body to a typed result. Index names and
document identifiers are placed in the path verbatim (no URL encoding).
"""
import asyncio
import time
from typing import Any, Generic, List, Optional, Sequence, TypeVar, Union
from urllib.parse import urlencode

from .models import Update, SearchRequest, SearchResponse
from ..api.request import HttpMethod, HttpRequest, RequestFactory
from ..api.service_template import ServiceTemplate, AsyncServiceTemplate
from ..exceptions import MeiliSearchEncodeError, MeiliSearchTimeoutError
from ..logging import get_logger
from ..serialization import DocumentCodec, Processor

T = TypeVar('T')

# Pre-serialized JSON, a list of documents, or a single document
DocumentPayload = Union[str, Sequence[T], T]


class _DocumentRequests(Generic[T]):
    """Request building and result mapping shared by both handlers."""
    
    def __init__(
        self,
        processor: Processor,
        index_name: str,
        codec: Optional[DocumentCodec[T]] = None,
        request_factory: Optional[RequestFactory] = None
    ):
        if not index_name:
            raise ValueError("index_name must be a non-empty string")
        self._processor = processor
        self._index_name = index_name
        self._codec = codec or DocumentCodec()
        self._request_factory = request_factory or RequestFactory()
        self._logger = get_logger('meilipy.documents')
    
    @property
    def index_name(self) -> str:
        return self._index_name
    
    @property
    def codec(self) -> DocumentCodec[T]:
        return self._codec
    
    # Paths
    
    def _index_path(self, *segments: str) -> str:
        return '/'.join(['', 'indexes', self._index_name, *segments])
    
    @staticmethod
    def _check_identifier(identifier: Any) -> str:
        identifier = str(identifier) if identifier is not None else ''
        if not identifier:
            raise ValueError("Document identifier must be a non-empty string")
        return identifier
    
    @staticmethod
    def _with_query(path: str, **params: Any) -> str:
        params = {k: v for k, v in params.items() if v is not None}
        return f"{path}?{urlencode(params)}" if params else path
    
    def _create(self, method: HttpMethod, path: str, body: Optional[str] = None) -> HttpRequest:
        return self._request_factory.create(method, path, {}, body)
    
    # Bodies
    
    def _encode(self, value: Any) -> str:
        try:
            return self._processor.encode(value)
        except Exception as e:
            self._logger.error(f"Cannot encode request body for index '{self._index_name}': {e}")
            raise MeiliSearchEncodeError(f"Cannot encode request body: {e}", cause=e) from e
    
    def _encode_documents(self, payload: DocumentPayload) -> str:
        if isinstance(payload, str):
            return payload
        documents = payload if isinstance(payload, (list, tuple)) else [payload]
        try:
            encoded = [self._codec.encode(document) for document in documents]
        except Exception as e:
            self._logger.error(f"Cannot encode documents for index '{self._index_name}': {e}")
            raise MeiliSearchEncodeError(f"Cannot encode documents: {e}", cause=e) from e
        return self._encode(encoded)
    
    @staticmethod
    def _search_request(query: Union[str, SearchRequest]) -> SearchRequest:
        if isinstance(query, SearchRequest):
            return query
        return SearchRequest(q=query)
    
    # Requests
    
    def _get_document_request(self, identifier: str) -> HttpRequest:
        path = self._index_path('documents', self._check_identifier(identifier))
        return self._create(HttpMethod.GET, path)
    
    def _get_documents_request(self, limit: int) -> HttpRequest:
        path = self._index_path('documents')
        if limit > 0:
            path += f"?limit={limit}"
        return self._create(HttpMethod.GET, path)
    
    def _write_documents_request(
        self,
        method: HttpMethod,
        payload: DocumentPayload,
        primary_key: Optional[str]
    ) -> HttpRequest:
        path = self._with_query(self._index_path('documents'), primaryKey=primary_key)
        return self._create(method, path, self._encode_documents(payload))
    
    def _delete_document_request(self, identifier: str) -> HttpRequest:
        path = self._index_path('documents', self._check_identifier(identifier))
        return self._create(HttpMethod.DELETE, path)
    
    def _delete_documents_request(self, identifiers: Optional[Sequence[str]]) -> HttpRequest:
        if identifiers is not None:
            if not identifiers:
                raise ValueError("identifiers must not be empty; call delete_documents() to delete everything")
            ids = [self._check_identifier(i) for i in identifiers]
            return self._create(
                HttpMethod.POST,
                self._index_path('documents', 'delete-batch'),
                self._encode(ids)
            )
        return self._create(HttpMethod.DELETE, self._index_path('documents'))
    
    def _search_http_request(self, query: Union[str, SearchRequest]) -> HttpRequest:
        body = self._encode(self._search_request(query))
        return self._create(HttpMethod.POST, self._index_path('search'), body)
    
    def _get_update_request(self, update_id: int) -> HttpRequest:
        return self._create(HttpMethod.GET, self._index_path('updates', str(update_id)))
    
    def _get_updates_request(self) -> HttpRequest:
        return self._create(HttpMethod.GET, self._index_path('updates'))
    
    # Results
    
    def _decode_document(self, data: Any) -> T:
        return self._codec.decode(data)
    
    def _decode_documents(self, data: Any) -> List[T]:
        if not isinstance(data, list):
            raise TypeError(f"Expected a JSON array of documents, got {type(data).__name__}")
        return [self._codec.decode(item) for item in data]
    
    def _decode_search(self, data: Any) -> SearchResponse[T]:
        return SearchResponse.from_dict(data, self._codec.decode)


class DocumentHandler(_DocumentRequests[T]):
    """
    Blocking document operations for one index.
    
    Example:
        >>> handler = DocumentHandler(template, 'movies')
        >>> update = handler.add_documents([{'id': '1', 'title': 'Carol'}])
        >>> handler.wait_for_update(update.update_id)
        >>> handler.search('carol').hits
    """
    
    def __init__(
        self,
        service_template: ServiceTemplate,
        index_name: str,
        codec: Optional[DocumentCodec[T]] = None,
        request_factory: Optional[RequestFactory] = None
    ):
        super().__init__(service_template.processor, index_name, codec, request_factory)
        self._template = service_template
    
    def get_document(self, identifier: str) -> T:
        """
        Retrieve a document with a specific identifier.
        
        Raises:
            MeiliSearchError: Transport, HTTP or decoding failure
        """
        return self._template.execute(self._get_document_request(identifier), self._decode_document)
    
    def get_documents(self, limit: int = 0) -> List[T]:
        """Retrieve documents of the index, at most ``limit`` when positive."""
        return self._template.execute(self._get_documents_request(limit), self._decode_documents)
    
    def add_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        """
        Add or replace documents.
        
        Args:
            payload: Pre-serialized JSON string, or documents to encode
            primary_key: Primary key attribute, when the index has none yet
        
        Returns:
            Update carrying the update id
        """
        request = self._write_documents_request(HttpMethod.POST, payload, primary_key)
        return self._template.execute(request, Update.from_dict)
    
    def replace_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        """Add or replace documents (same request as add_documents)."""
        return self.add_documents(payload, primary_key)
    
    def update_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        """Add documents or update the given fields of existing ones."""
        request = self._write_documents_request(HttpMethod.PUT, payload, primary_key)
        return self._template.execute(request, Update.from_dict)
    
    def delete_document(self, identifier: str) -> Update:
        return self._template.execute(self._delete_document_request(identifier), Update.from_dict)
    
    def delete_documents(self, identifiers: Optional[Sequence[str]] = None) -> Update:
        """Delete the listed documents, or every document when none are given."""
        return self._template.execute(self._delete_documents_request(identifiers), Update.from_dict)
    
    def search(self, query: Union[str, SearchRequest]) -> SearchResponse[T]:
        """Search the index with a query string or a full SearchRequest."""
        return self._template.execute(self._search_http_request(query), self._decode_search)
    
    def get_update(self, update_id: int) -> Update:
        return self._template.execute(self._get_update_request(update_id), Update.from_dict)
    
    def get_updates(self) -> List[Update]:
        return self._template.execute(self._get_updates_request(), Update.list_from)
    
    def wait_for_update(self, update_id: int, timeout: float = 5.0, interval: float = 0.05) -> Update:
        """
        Poll an update until the server finished it.
        
        Returns the final Update, whether processed or failed.
        
        Raises:
            MeiliSearchTimeoutError: Still pending after ``timeout`` seconds
        """
        deadline = time.monotonic() + timeout
        while True:
            update = self.get_update(update_id)
            if update.is_finished():
                return update
            if time.monotonic() >= deadline:
                raise MeiliSearchTimeoutError(update_id, timeout)
            time.sleep(interval)


class AsyncDocumentHandler(_DocumentRequests[T]):
    """
    Asynchronous document operations for one index.
    
    Example:
        >>> async with AsyncMeiliClient(config) as client:
        ...     movies = client.index('movies')
        ...     response = await movies.search('carol')
    """
    
    def __init__(
        self,
        service_template: AsyncServiceTemplate,
        index_name: str,
        codec: Optional[DocumentCodec[T]] = None,
        request_factory: Optional[RequestFactory] = None
    ):
        super().__init__(service_template.processor, index_name, codec, request_factory)
        self._template = service_template
    
    async def get_document(self, identifier: str) -> T:
        return await self._template.execute(self._get_document_request(identifier), self._decode_document)
    
    async def get_documents(self, limit: int = 0) -> List[T]:
        return await self._template.execute(self._get_documents_request(limit), self._decode_documents)
    
    async def add_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        request = self._write_documents_request(HttpMethod.POST, payload, primary_key)
        return await self._template.execute(request, Update.from_dict)
    
    async def replace_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        return await self.add_documents(payload, primary_key)
    
    async def update_documents(self, payload: DocumentPayload, primary_key: Optional[str] = None) -> Update:
        request = self._write_documents_request(HttpMethod.PUT, payload, primary_key)
        return await self._template.execute(request, Update.from_dict)
    
    async def delete_document(self, identifier: str) -> Update:
        return await self._template.execute(self._delete_document_request(identifier), Update.from_dict)
    
    async def delete_documents(self, identifiers: Optional[Sequence[str]] = None) -> Update:
        return await self._template.execute(self._delete_documents_request(identifiers), Update.from_dict)
    
    async def search(self, query: Union[str, SearchRequest]) -> SearchResponse[T]:
        return await self._template.execute(self._search_http_request(query), self._decode_search)
    
    async def get_update(self, update_id: int) -> Update:
        return await self._template.execute(self._get_update_request(update_id), Update.from_dict)
    
    async def get_updates(self) -> List[Update]:
        return await self._template.execute(self._get_updates_request(), Update.list_from)
    
    async def wait_for_update(self, update_id: int, timeout: float = 5.0, interval: float = 0.05) -> Update:
        """Poll an update until the server finished it (see DocumentHandler.wait_for_update)."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while True:
            update = await self.get_update(update_id)
            if update.is_finished():
                return update
            if loop.time() >= deadline:
                raise MeiliSearchTimeoutError(update_id, timeout)
            await asyncio.sleep(interval)
