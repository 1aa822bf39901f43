"""HTTP session creation."""
from .session_factory import SessionFactory

__all__ = [
    'SessionFactory',
]
