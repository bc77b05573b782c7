"""I/O adapters for jpegquality."""

from .source import Source, open_stream

__all__ = [
    'Source',
    'open_stream',
]
