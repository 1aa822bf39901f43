"""Request factory for API requests."""
from typing import Dict, Optional

from .http_request import HttpMethod, HttpRequest


class RequestFactory:
    """Builds HttpRequest descriptors."""
    
    def create(
        self,
        method: HttpMethod,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None
    ) -> HttpRequest:
        """
        Create a request descriptor.
        
        Args:
            method: HTTP verb
            path: Request path (may carry a query string)
            headers: Extra headers for this request only
            body: Already serialized body
            
        Returns:
            HttpRequest instance
        """
        if not path.startswith('/'):
            path = '/' + path
        return HttpRequest(
            method=HttpMethod(method),
            path=path,
            headers=dict(headers or {}),
            body=body
        )
