"""
Exceptions raised by the meilipy client.

Every failure of a client operation surfaces as a MeiliSearchError.
Subclasses tell transport, encoding and decoding failures apart, and
the underlying exception is kept on ``cause`` (and ``__cause__``).
"""
from typing import Optional, Any


class MeiliSearchError(Exception):
    """Base exception for all client errors."""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            cause: Underlying exception (if any)
        """
        self.message = message
        self.cause = cause
        super().__init__(message)


class MeiliSearchTransportError(MeiliSearchError):
    """Exception raised when the request could not be carried out."""
    pass


class MeiliSearchApiError(MeiliSearchTransportError):
    """Exception raised when the server answers with an error status."""
    
    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        error_link: Optional[str] = None,
        body: Any = None,
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            status_code: HTTP status of the response
            message: Server-side error message (if the body carries one)
            error_code: Server-side error code, e.g. 'document_not_found'
            error_link: Documentation link for the error code
            body: Raw response text
        """
        self.status_code = status_code
        self.error_code = error_code
        self.error_link = error_link
        self.body = body
        text = f"HTTP {status_code}"
        if error_code:
            text += f" ({error_code})"
        if message:
            text += f": {message}"
        super().__init__(text)
        self.server_message = message


class MeiliSearchEncodeError(MeiliSearchError):
    """Exception raised when a request body cannot be serialized."""
    pass


class MeiliSearchDecodeError(MeiliSearchError):
    """Exception raised when a response body cannot be deserialized."""
    pass


class MeiliSearchTimeoutError(MeiliSearchError):
    """Exception raised when an update is not processed in time."""
    
    def __init__(self, update_id: int, timeout: float) -> None:
        self.update_id = update_id
        self.timeout = timeout
        super().__init__(f"Update {update_id} not processed after {timeout}s")
