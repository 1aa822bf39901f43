"""Session factory using Factory Pattern."""
import requests
import aiohttp
from requests.adapters import HTTPAdapter

from ..config import APIConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""
    
    @staticmethod
    def create_sync_session(config: APIConfig) -> requests.Session:
        """Creates a synchronous HTTP session without automatic retries."""
        session = requests.Session()
        session.headers.update(config.get_headers())
        session.mount('http://', HTTPAdapter(max_retries=0))
        session.mount('https://', HTTPAdapter(max_retries=0))
        session.verify = config.ssl.to_requests_verify()
        cert = config.ssl.to_requests_cert()
        if cert:
            session.cert = cert
        proxies = config.proxy.to_requests_proxies() if config.proxy else None
        if proxies:
            session.proxies.update(proxies)
        return session
    
    @staticmethod
    def create_async_session(config: APIConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session."""
        connector = aiohttp.TCPConnector(**config.get_connector_kwargs())
        return aiohttp.ClientSession(
            connector=connector,
            **config.get_session_kwargs()
        )
