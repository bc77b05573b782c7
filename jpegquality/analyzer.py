"""
Photo analyzer - document fields plus estimated JPEG quality.
"""
import hashlib
import mimetypes
from pathlib import Path
from typing import Dict, Any, Union
from datetime import datetime

from jpegquality.image.info import ImageInfo


def sha256_file(path: Path, chunk_size: int = 65536) -> str:
    """Calculate SHA256 hash of file."""
    hasher = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def analyze(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Analyze an image file.

    Returns:
        Dict with document fields and image fields, quality included
        (None when the file is not a JPEG or has no usable table)
    """
    path = Path(path)
    stat = path.stat()

    info = ImageInfo(path)
    info.load()

    mimetype, _ = mimetypes.guess_type(str(path))

    return {
        # Document fields
        "filename": path.name,
        "sha256sum": sha256_file(path),
        "mimetype": mimetype or f"image/{info.format.lower()}",
        "mtime": datetime.fromtimestamp(stat.st_mtime),
        "ctime": datetime.fromtimestamp(stat.st_ctime),
        # Image fields
        "width": info.width,
        "height": info.height,
        "format": info.format,
        "quality": info.quality,
    }
