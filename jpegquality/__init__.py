"""
jpegquality - Estimate the encoding quality of JPEG images.

JPEG files do not store the quality setting they were encoded with. This
library infers it (1-100) from the luminance quantization table:
- Scans JPEG marker segments up to the first DQT segment
- Maps the table's coefficient sum onto reference sums for each quality
- Accepts file paths, raw bytes, or open binary handles
- Reports image metadata and batch results for whole folders

Example usage:
    from jpegquality import jpeg_quality

    print(jpeg_quality("photo.jpg"))

    with open("photo.jpg", "rb") as f:
        print(jpeg_quality(f))

    print(jpeg_quality(data))  # bytes

    # Folder processing
    from jpegquality import BatchEstimator, BatchConfig

    estimator = BatchEstimator(BatchConfig(recursive=True))
    reports = estimator.estimate_folder(Path("photos"))
    print(estimator.summarize(reports))
"""

from .quality import jpeg_quality
from .core.errors import (
    JpegQualityError,
    NotAJpegError,
    ReadError,
    QualityIndeterminateError,
)
from .core.interfaces import (
    ByteStream,
    QuantizationTable,
    QualityReport,
    BatchConfig,
)
from .jpeg import (
    locate_luminance_dqt,
    estimate_quality,
    coefficient_sum,
    REFERENCE_SUMS,
)
from .io import open_stream
from .image import ImageInfo, JpegSelector
from .batch import BatchEstimator
from .analyzer import analyze, sha256_file

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    "jpeg_quality",

    # Errors
    "JpegQualityError",
    "NotAJpegError",
    "ReadError",
    "QualityIndeterminateError",

    # Core types
    "ByteStream",
    "QuantizationTable",
    "QualityReport",
    "BatchConfig",

    # JPEG internals
    "locate_luminance_dqt",
    "estimate_quality",
    "coefficient_sum",
    "REFERENCE_SUMS",
    "open_stream",

    # Image metadata and folders
    "ImageInfo",
    "JpegSelector",
    "BatchEstimator",

    # Analyzer
    "analyze",
    "sha256_file",
]
