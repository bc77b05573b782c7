"""
JPEG file selection within folders.
"""
from pathlib import Path
from typing import List, Optional
from natsort import natsorted
import logging

from ..core.interfaces import BatchConfig

logger = logging.getLogger(__name__)


class JpegSelector:
    """Lists JPEG files in a folder, in natural sort order."""

    def __init__(self, config: Optional[BatchConfig] = None):
        self.config = config or BatchConfig()

    def is_jpeg(self, path: Path) -> bool:
        """Check if path is a file with a JPEG extension."""
        path = Path(path)
        return path.is_file() and path.suffix.lower() in self.config.extensions

    def get_images(self, folder: Path, recursive: Optional[bool] = None) -> List[Path]:
        """Get all JPEG files from folder."""
        folder = Path(folder)
        if recursive is None:
            recursive = self.config.recursive

        if recursive:
            images = [
                f for f in folder.rglob('*')
                if self.is_jpeg(f)
                and not self._is_in_ignored_folder(f.relative_to(folder))
            ]
        else:
            images = [
                f for f in folder.iterdir()
                if self.is_jpeg(f)
            ]

        logger.debug(f"Found {len(images)} JPEG files in {folder}")
        return natsorted(images)

    def _is_in_ignored_folder(self, path: Path) -> bool:
        """Check if path is within an ignored folder."""
        return any(ignored in path.parts[:-1] for ignored in self.config.ignored_folders)
