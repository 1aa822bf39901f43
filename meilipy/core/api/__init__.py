"""Meilisearch HTTP API plumbing."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .request import HttpMethod, HttpRequest, HttpResponse, RequestFactory, ResponseHandler
from .transport import Transport, AsyncTransport, RequestsTransport, AiohttpTransport
from .service_template import ServiceTemplate, AsyncServiceTemplate

__all__ = [
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    
    # Requests
    'HttpMethod',
    'HttpRequest',
    'HttpResponse',
    'RequestFactory',
    'ResponseHandler',
    
    # Transports
    'Transport',
    'AsyncTransport',
    'RequestsTransport',
    'AiohttpTransport',
    
    # Templates
    'ServiceTemplate',
    'AsyncServiceTemplate',
]
