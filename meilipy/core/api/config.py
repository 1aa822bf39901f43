"""
API configuration module.

Provides configuration for the sync and async Meilisearch transports.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple, Union
import ssl

import aiohttp

DEFAULT_HOST = 'http://localhost:7700'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        if self.username and self.password:
            # Insert credentials into URL
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return self.url
    
    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to the requests ``proxies`` mapping."""
        url = self.to_aiohttp_proxy()
        if not url:
            return None
        return {'http': url, 'https': url}


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.
    
    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration (aiohttp)."""
        if not self.verify:
            return False  # Disable SSL verification
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )
        
        context.check_hostname = self.check_hostname
        
        return context
    
    def to_requests_verify(self) -> Union[bool, str]:
        """Value for the requests ``verify`` argument."""
        if not self.verify:
            return False
        return self.ca_file or True
    
    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Value for the requests ``cert`` argument."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.
    
    Granular control over different timeout types.
    """
    total: float = 60.0  # Total request timeout
    connect: float = 10.0  # Connection timeout
    sock_read: float = 30.0  # Socket read timeout
    sock_connect: float = 10.0  # Socket connect timeout
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )
    
    def to_requests_timeout(self) -> Tuple[float, float]:
        """Convert to a requests (connect, read) timeout tuple."""
        return (self.connect, self.sock_read)


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Centralizes all configuration options for the Meilisearch client.
    """
    # Server settings
    host: str = DEFAULT_HOST
    api_key: Optional[str] = None
    
    # User agent
    user_agent: str = 'meilipy/0.1.0'
    
    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    # Logging
    log_level: int = 20  # logging.INFO
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )
    
    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )
    
    def build_url(self, path: str) -> str:
        """Join the host and a request path."""
        return self.host.rstrip('/') + '/' + path.lstrip('/')
    
    def get_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        headers = {
            'Content-Type': 'application/json',
            'User-Agent': self.user_agent,
        }
        if self.api_key:
            headers['X-Meili-API-Key'] = self.api_key
        headers.update(self.extra_headers)
        return headers
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': self.get_headers(),
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
