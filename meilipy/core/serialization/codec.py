"""
Document codecs.

A codec maps a caller document type to the JSON-compatible dict sent to
the server, and back. Handlers receive one at construction instead of
inspecting the document type at runtime.
"""
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Type, TypeVar

T = TypeVar('T')


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class DocumentCodec(Generic[T]):
    """
    Encode/decode pair for documents of type T.
    
    Attributes:
        encode: Turns a document into a JSON-compatible value
        decode: Builds a document from a decoded JSON value
    
    Example:
        >>> @dataclass
        ... class Movie:
        ...     id: str
        ...     title: str
        >>> codec = DocumentCodec.for_dataclass(Movie)
        >>> codec.decode({'id': '1', 'title': 'Carol', 'genre': 'Drama'})
        Movie(id='1', title='Carol')
    """
    encode: Callable[[T], Any] = _identity
    decode: Callable[[Any], T] = _identity
    
    @classmethod
    def identity(cls) -> 'DocumentCodec[Dict[str, Any]]':
        """Codec passing plain dicts through unchanged."""
        return cls()
    
    @classmethod
    def for_dataclass(cls, model: Type[T]) -> 'DocumentCodec[T]':
        """
        Codec for a dataclass document type.
        
        Response keys that are not fields of ``model`` are dropped.
        """
        if not dataclasses.is_dataclass(model):
            raise TypeError(f"{model!r} is not a dataclass")
        names = {f.name for f in dataclasses.fields(model)}
        
        def decode(data: Dict[str, Any]) -> T:
            return model(**{k: v for k, v in data.items() if k in names})
        
        return cls(encode=dataclasses.asdict, decode=decode)
