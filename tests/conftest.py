"""Pytest fixtures for meilipy tests."""
import json
from dataclasses import dataclass
from typing import List, Optional

import pytest

from meilipy.core.api import HttpRequest, HttpResponse, ServiceTemplate, AsyncServiceTemplate
from meilipy.core.documents import DocumentHandler, AsyncDocumentHandler
from meilipy.core.serialization import DocumentCodec


@dataclass
class Movie:
    """Document type used across the tests."""
    id: str
    title: str
    genre: Optional[str] = None


class RecordingTransport:
    """Transport stub that records requests and replays canned responses."""
    
    def __init__(self):
        self.requests: List[HttpRequest] = []
        self.responses: List[HttpResponse] = []
        self.closed = False
    
    def reply(self, body=None, status: int = 200) -> 'RecordingTransport':
        text = body if isinstance(body, str) else json.dumps(body)
        self.responses.append(HttpResponse(status_code=status, text=text))
        return self
    
    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return HttpResponse(status_code=202, text='{"updateId": 1}')
    
    @property
    def last(self) -> HttpRequest:
        return self.requests[-1]
    
    def close(self):
        self.closed = True


class AsyncRecordingTransport(RecordingTransport):
    """Async flavour of RecordingTransport."""
    
    async def send(self, request: HttpRequest) -> HttpResponse:
        return RecordingTransport.send(self, request)
    
    async def close(self):
        self.closed = True


@pytest.fixture
def transport():
    """Recording blocking transport."""
    return RecordingTransport()


@pytest.fixture
def async_transport():
    """Recording async transport."""
    return AsyncRecordingTransport()


@pytest.fixture
def template(transport):
    return ServiceTemplate(transport)


@pytest.fixture
def handler(template):
    """Handler on index 'movies' with plain dict documents."""
    return DocumentHandler(template, 'movies')


@pytest.fixture
def movie_handler(template):
    """Handler on index 'movies' decoding to Movie."""
    return DocumentHandler(template, 'movies', DocumentCodec.for_dataclass(Movie))


@pytest.fixture
def async_handler(async_transport):
    return AsyncDocumentHandler(AsyncServiceTemplate(async_transport), 'movies')


@pytest.fixture
def sample_movies():
    """Returns sample documents."""
    return [
        {'id': '1', 'title': 'Carol', 'genre': 'Drama'},
        {'id': '2', 'title': 'Wonder Woman', 'genre': 'Action'},
    ]


@pytest.fixture
def sample_search_response():
    """Returns a search response body as sent by the server."""
    return {
        'hits': [{'id': '1', 'title': 'Carol', 'genre': 'Drama'}],
        'offset': 0,
        'limit': 20,
        'nbHits': 1,
        'exhaustiveNbHits': False,
        'processingTimeMs': 2,
        'query': 'carol',
    }


@pytest.fixture
def movie_type():
    """The Movie dataclass."""
    return Movie
