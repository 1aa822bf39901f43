"""JSON processing and document codecs."""
from .processor import JsonProcessor, Processor
from .codec import DocumentCodec

__all__ = [
    'JsonProcessor',
    'Processor',
    'DocumentCodec',
]
