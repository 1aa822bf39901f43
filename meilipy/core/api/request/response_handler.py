"""Response handler for API responses."""
import json
from typing import Optional

from .http_request import HttpResponse
from ...exceptions import MeiliSearchApiError


class ResponseHandler:
    """Handles API responses."""
    
    @staticmethod
    def handle_error(response: HttpResponse) -> Optional[MeiliSearchApiError]:
        """Builds the error for a failed response, or None when it succeeded."""
        if response.ok:
            return None
        
        message = error_code = error_link = None
        try:
            payload = json.loads(response.text) if response.text else None
        except ValueError:
            payload = None
        
        if isinstance(payload, dict):
            message = payload.get('message')
            error_code = payload.get('errorCode')
            error_link = payload.get('errorLink')
        elif response.text:
            message = response.text
        
        return MeiliSearchApiError(
            response.status_code,
            message=message,
            error_code=error_code,
            error_link=error_link,
            body=response.text
        )
