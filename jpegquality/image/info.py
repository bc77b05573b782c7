"""
Image information extraction.
"""
from pathlib import Path
from typing import Optional
from PIL import Image
import logging

from ..core.errors import JpegQualityError
from ..quality import jpeg_quality

logger = logging.getLogger(__name__)


class ImageInfo:
    """Extracts and provides image metadata, including estimated JPEG quality."""

    JPEG_FORMATS = ("JPEG", "JPG", "MPO")

    def __init__(self, input_path: Path):
        self.input_path = Path(input_path)
        self._loaded = False
        self._width = 0
        self._height = 0
        self._format = ""
        self._mode = ""
        self._quality: Optional[int] = None

    def load(self) -> None:
        """Load image metadata."""
        if self._loaded:
            return

        if not self.input_path.exists():
            raise ValueError(f"Image file does not exist: {self.input_path}")

        with Image.open(self.input_path) as img:
            self._width, self._height = img.size
            self._format = img.format or ""
            self._mode = img.mode

        if self._format.upper() in self.JPEG_FORMATS:
            try:
                self._quality = jpeg_quality(self.input_path)
            except JpegQualityError as e:
                logger.debug(f"Could not estimate JPEG quality: {e}")

        self._loaded = True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise RuntimeError("ImageInfo not loaded. Call load() first.")

    @property
    def width(self) -> int:
        self._ensure_loaded()
        return self._width

    @property
    def height(self) -> int:
        self._ensure_loaded()
        return self._height

    @property
    def format(self) -> str:
        self._ensure_loaded()
        return self._format

    @property
    def mode(self) -> str:
        self._ensure_loaded()
        return self._mode

    @property
    def megapixels(self) -> float:
        self._ensure_loaded()
        return (self._width * self._height) / 1_000_000

    @property
    def quality(self) -> Optional[int]:
        """
        Estimated JPEG quality (1-100).

        Returns None for non-JPEG images or if quality cannot be estimated.
        """
        self._ensure_loaded()
        return self._quality
