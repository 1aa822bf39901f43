"""
JSON encoder/decoder used for request and response bodies.
"""
import dataclasses
import json
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Processor(Protocol):
    """Encoder/decoder pair consumed by the service template."""
    
    def encode(self, value: Any) -> str:
        ...
    
    def decode(self, text: str) -> Any:
        ...


class JsonProcessor:
    """
    Encodes Python values to JSON and back with the stdlib json module.
    
    Objects exposing ``to_dict()`` and dataclass instances are encoded
    through their dict form. Anything else json can't handle raises
    TypeError.
    """
    
    def __init__(self, ensure_ascii: bool = False):
        self.ensure_ascii = ensure_ascii
    
    def encode(self, value: Any) -> str:
        return json.dumps(value, default=self._default, ensure_ascii=self.ensure_ascii)
    
    def decode(self, text: str) -> Any:
        if text is None or not text.strip():
            return None
        return json.loads(text)
    
    @staticmethod
    def _default(value: Any) -> Any:
        to_dict = getattr(value, 'to_dict', None)
        if callable(to_dict):
            return to_dict()
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
