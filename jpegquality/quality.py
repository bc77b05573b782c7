"""
Public entry point: estimate the quality of a JPEG image.
"""
import logging

from .io.source import Source, open_stream
from .jpeg.scanner import locate_luminance_dqt
from .jpeg.estimator import estimate_quality

logger = logging.getLogger(__name__)


def jpeg_quality(source: Source) -> int:
    """
    Estimate the quality (1-100) a JPEG image was encoded with.

    The value is approximate: JPEG files do not store quality, so it is
    inferred from the first (luminance) quantization table.

    Args:
        source: File path, raw JPEG bytes, or an open binary handle.
            Handles are left open and read from their current position.

    Returns:
        Estimated quality between 1 and 100

    Raises:
        NotAJpegError: Data is not a JPEG stream
        QualityIndeterminateError: No usable quantization table
        ReadError: Underlying I/O failed
        TypeError: Unsupported source type
    """
    with open_stream(source) as stream:
        table = locate_luminance_dqt(stream)

    quality = estimate_quality(table.payload, table.is_8bit)
    logger.debug(f"Estimated quality {quality} from {table.precision_bits}-bit table")
    return quality
