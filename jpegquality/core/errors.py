"""
Error types raised by quality estimation.
Every failure is terminal for the call; nothing is retried or defaulted.
"""
from typing import Optional


class JpegQualityError(Exception):
    """Base class for all estimation failures."""


class NotAJpegError(JpegQualityError, ValueError):
    """Stream lacks the SOI marker or has a malformed marker mid-scan."""

    def __init__(self, message: str = "Not a JPEG file"):
        super().__init__(message)


class ReadError(JpegQualityError, OSError):
    """
    Underlying I/O failed: short read, failed seek or a transport error.

    The underlying exception is chained and also kept on ``cause``.
    """

    def __init__(self, message: str = "File read error", cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class QualityIndeterminateError(JpegQualityError):
    """No usable luminance quantization table before scan data or end of image."""

    def __init__(self, message: str = "Could not determine quality"):
        super().__init__(message)
