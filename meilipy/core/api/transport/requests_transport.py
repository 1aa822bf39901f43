"""Blocking transport built on requests."""
from typing import Optional

import requests

from ..config import APIConfig
from ..request import HttpRequest, HttpResponse
from ..session import SessionFactory
from ...logging import get_logger, truncate


class RequestsTransport:
    """
    Sends requests through a shared requests.Session.
    
    Example:
        >>> transport = RequestsTransport(APIConfig(host='http://localhost:7700'))
        >>> response = transport.send(HttpRequest(HttpMethod.GET, '/indexes/movies/documents'))
    """
    
    def __init__(self, config: Optional[APIConfig] = None, session: Optional[requests.Session] = None):
        self._config = config or APIConfig.default()
        self._session = session or SessionFactory.create_sync_session(self._config)
        self._logger = get_logger('meilipy.transport')
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    def send(self, request: HttpRequest) -> HttpResponse:
        url = self._config.build_url(request.path)
        data = request.body.encode('utf-8') if request.body is not None else None
        
        self._logger.debug(f"{request.method.value} {url}")
        if request.body is not None:
            self._logger.debug(f"Request data: {truncate(request.body, 300)}")
        
        response = self._session.request(
            request.method.value,
            url,
            data=data,
            headers=request.headers or None,
            timeout=self._config.timeout.to_requests_timeout()
        )
        
        self._logger.debug(f"Response {response.status_code}: {truncate(response.text)}")
        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers)
        )
    
    def close(self) -> None:
        self._session.close()
