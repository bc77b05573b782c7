"""
Image metadata and file selection for jpegquality.
"""
from .info import ImageInfo
from .selector import JpegSelector

__all__ = [
    'ImageInfo',
    'JpegSelector',
]
