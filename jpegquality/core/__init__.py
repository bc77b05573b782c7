"""
Core module - Error types, protocols, and data types for jpegquality.
"""
from .errors import (
    JpegQualityError,
    NotAJpegError,
    ReadError,
    QualityIndeterminateError,
)
from .interfaces import (
    # Protocols
    ByteStream,

    # Data classes
    QuantizationTable,
    QualityReport,
    BatchConfig,
)

__all__ = [
    # Errors
    "JpegQualityError",
    "NotAJpegError",
    "ReadError",
    "QualityIndeterminateError",

    # Protocols
    "ByteStream",

    # Data classes
    "QuantizationTable",
    "QualityReport",
    "BatchConfig",
]
