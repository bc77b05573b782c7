"""
JPEG segment scanner.
Walks marker segments until the first DQT payload is found.
"""
import io
import logging
import struct

from .markers import (
    MARKER_PREFIX,
    SOI,
    EOI,
    SOS,
    DQT,
    LENGTH_FIELD_SIZE,
    MIN_DQT_PAYLOAD,
    marker_name,
)
from ..core.errors import NotAJpegError, ReadError, QualityIndeterminateError
from ..core.interfaces import ByteStream, QuantizationTable

logger = logging.getLogger(__name__)


def _read_exact(stream: ByteStream, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ReadError."""
    try:
        data = stream.read(size)
    except (OSError, ValueError) as e:
        raise ReadError("File read error", e) from e

    if data is None or len(data) != size:
        got = 0 if data is None else len(data)
        raise ReadError(f"File read error: expected {size} bytes, got {got}")
    return bytes(data)


def _read_length(stream: ByteStream) -> int:
    return struct.unpack('>H', _read_exact(stream, LENGTH_FIELD_SIZE))[0]


def _skip(stream: ByteStream, count: int) -> None:
    try:
        stream.seek(count, io.SEEK_CUR)
    except (OSError, ValueError) as e:
        raise ReadError("File read error", e) from e


def locate_luminance_dqt(stream: ByteStream) -> QuantizationTable:
    """
    Find the first DQT segment of a JPEG stream.

    Only the first DQT segment is consulted; tables defined later
    (typically chrominance) are never looked at.

    Args:
        stream: Binary stream positioned at the start of the image

    Returns:
        QuantizationTable with the raw segment payload and its precision flag

    Raises:
        NotAJpegError: Missing SOI or a marker without the 0xFF prefix
        QualityIndeterminateError: Scan data or EOI reached first, or DQT too small
        ReadError: Short read or failed seek
    """
    if _read_exact(stream, 2) != SOI:
        raise NotAJpegError()

    while True:
        marker = _read_exact(stream, 2)

        if marker in (SOS, EOI):
            logger.debug(f"Reached {marker_name(marker)} before any DQT segment")
            raise QualityIndeterminateError()

        if marker[0] != MARKER_PREFIX:
            raise NotAJpegError(f"Not a JPEG file: invalid marker 0x{marker.hex().upper()}")

        length = _read_length(stream)

        if marker != DQT:
            logger.debug(f"Skipping {marker_name(marker)} segment ({length} bytes)")
            _skip(stream, length - LENGTH_FIELD_SIZE)
            continue

        payload_size = length - LENGTH_FIELD_SIZE
        if payload_size < MIN_DQT_PAYLOAD:
            logger.debug(f"DQT payload too small: {payload_size} bytes")
            raise QualityIndeterminateError()

        payload = _read_exact(stream, payload_size)
        is_8bit = (payload[0] & 0xF0) == 0
        logger.debug(f"Found DQT segment: {payload_size} bytes, {'8' if is_8bit else '16'}-bit")

        return QuantizationTable(payload=payload, is_8bit=is_8bit)
