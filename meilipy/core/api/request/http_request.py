"""Transport-neutral request and response descriptors."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class HttpMethod(str, Enum):
    """HTTP verbs used by the document API."""
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


@dataclass(frozen=True)
class HttpRequest:
    """
    A request ready to be sent by a transport.
    
    Attributes:
        method: HTTP verb
        path: Path relative to the configured host, query string included
        headers: Per-request headers (merged over the config headers)
        body: Serialized JSON body, or None
    """
    method: HttpMethod
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass
class HttpResponse:
    """Raw response returned by a transport."""
    status_code: int
    text: str = ''
    headers: Dict[str, str] = field(default_factory=dict)
    
    @property
    def ok(self) -> bool:
        return self.status_code < 400
