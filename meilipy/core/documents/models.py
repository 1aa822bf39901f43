"""
Data models for the document API.

Wire keys are camelCase; attributes are snake_case.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar('T')

UPDATE_ENQUEUED = 'enqueued'
UPDATE_PROCESSED = 'processed'
UPDATE_FAILED = 'failed'


@dataclass
class Update:
    """
    Receipt of an asynchronous write.
    
    Write calls only return ``updateId``; the status endpoints fill in
    the remaining fields.
    
    Attributes:
        update_id: Identifier used to poll the update status
        status: 'enqueued', 'processed' or 'failed'
        type: Update type description returned by the server
        duration: Processing time in seconds
        enqueued_at: ISO timestamp
        processed_at: ISO timestamp
        error: Error message when the update failed
    """
    update_id: int
    status: Optional[str] = None
    type: Optional[Any] = None
    duration: Optional[float] = None
    enqueued_at: Optional[str] = None
    processed_at: Optional[str] = None
    error: Optional[str] = None
    
    def is_processed(self) -> bool:
        return self.status == UPDATE_PROCESSED
    
    def is_failed(self) -> bool:
        return self.status == UPDATE_FAILED
    
    def is_finished(self) -> bool:
        """True once the server stopped working on the update."""
        return self.status in (UPDATE_PROCESSED, UPDATE_FAILED)
    
    def to_dict(self) -> Dict[str, Any]:
        result = {'updateId': self.update_id}
        optional = {
            'status': self.status,
            'type': self.type,
            'duration': self.duration,
            'enqueuedAt': self.enqueued_at,
            'processedAt': self.processed_at,
            'error': self.error,
        }
        result.update({k: v for k, v in optional.items() if v is not None})
        return result
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Update':
        """Create from a response body; ``updateId`` is required."""
        return cls(
            update_id=data['updateId'],
            status=data.get('status'),
            type=data.get('type'),
            duration=data.get('duration'),
            enqueued_at=data.get('enqueuedAt'),
            processed_at=data.get('processedAt'),
            error=data.get('error'),
        )
    
    @classmethod
    def list_from(cls, data: List[Dict[str, Any]]) -> List['Update']:
        return [cls.from_dict(item) for item in data]


@dataclass
class SearchRequest:
    """
    Search query and its options.
    
    Only ``q`` is required. Options left as None are not sent, so
    ``SearchRequest('q')`` encodes to ``{"q": "q"}``.
    """
    q: str
    offset: Optional[int] = None
    limit: Optional[int] = None
    attributes_to_retrieve: Optional[List[str]] = None
    attributes_to_crop: Optional[List[str]] = None
    crop_length: Optional[int] = None
    attributes_to_highlight: Optional[List[str]] = None
    filters: Optional[str] = None
    matches: Optional[bool] = None
    
    _WIRE_KEYS = {
        'q': 'q',
        'offset': 'offset',
        'limit': 'limit',
        'attributes_to_retrieve': 'attributesToRetrieve',
        'attributes_to_crop': 'attributesToCrop',
        'crop_length': 'cropLength',
        'attributes_to_highlight': 'attributesToHighlight',
        'filters': 'filters',
        'matches': 'matches',
    }
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the request body, skipping unset options."""
        result = {}
        for attr, key in self._WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchRequest':
        return cls(**{
            attr: data[key] for attr, key in cls._WIRE_KEYS.items() if key in data
        })


@dataclass
class SearchResponse(Generic[T]):
    """
    Search result page.
    
    Attributes:
        hits: Matching documents, decoded through the index codec
        offset: Number of skipped hits
        limit: Maximum number of hits requested
        nb_hits: Estimated total number of matches
        exhaustive_nb_hits: Whether ``nb_hits`` is exact
        processing_time_ms: Server-side processing time
        query: Query string the server answered
    """
    hits: List[T] = field(default_factory=list)
    offset: int = 0
    limit: int = 0
    nb_hits: int = 0
    exhaustive_nb_hits: bool = False
    processing_time_ms: int = 0
    query: str = ''
    
    def __len__(self) -> int:
        return len(self.hits)
    
    def __iter__(self):
        return iter(self.hits)
    
    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        decode_hit: Optional[Callable[[Any], T]] = None
    ) -> 'SearchResponse[T]':
        hits = data.get('hits') or []
        if decode_hit:
            hits = [decode_hit(hit) for hit in hits]
        return cls(
            hits=hits,
            offset=data.get('offset', 0),
            limit=data.get('limit', 0),
            nb_hits=data.get('nbHits', 0),
            exhaustive_nb_hits=data.get('exhaustiveNbHits', False),
            processing_time_ms=data.get('processingTimeMs', 0),
            query=data.get('query', ''),
        )
