"""
Adapts paths, byte buffers and open handles into binary streams.
"""
import io
import os
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union, BinaryIO

from ..core.errors import ReadError
from ..core.interfaces import ByteStream

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, bytes, bytearray, memoryview, BinaryIO]


@contextmanager
def open_stream(source: Source) -> Iterator[ByteStream]:
    """
    Yield a binary stream for ``source``.

    Paths are opened in binary mode and closed on exit. Byte buffers are
    wrapped in memory. Handles are used as-is and left open; a text handle
    is read through its underlying binary buffer.

    Raises:
        ReadError: Path could not be opened
        TypeError: Source type is not supported
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            f = open(path, 'rb')
        except OSError as e:
            raise ReadError("File read error", e) from e
        logger.debug(f"Opened {path}")
        with f:
            yield f
        return

    if isinstance(source, (bytes, bytearray, memoryview)):
        yield io.BytesIO(bytes(source))
        return

    if isinstance(source, io.TextIOBase) and hasattr(source, 'buffer'):
        yield source.buffer
        return

    if callable(getattr(source, 'read', None)):
        yield source
        return

    raise TypeError(f"Unsupported source: {source!r}")
