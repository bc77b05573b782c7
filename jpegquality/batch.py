"""
BatchEstimator - Estimates quality for every JPEG in a folder.
Per-file failures are collected in reports instead of aborting the batch.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import numpy as np

from .core.errors import JpegQualityError
from .core.interfaces import BatchConfig, QualityReport
from .image.selector import JpegSelector
from .quality import jpeg_quality

logger = logging.getLogger(__name__)


class BatchEstimator:
    """
    Folder-level quality estimation.

    Example:
        estimator = BatchEstimator(BatchConfig(recursive=True))
        reports = estimator.estimate_folder(Path("photos"))
        print(estimator.summarize(reports))
    """

    def __init__(self, config: Optional[BatchConfig] = None):
        self.config = config or BatchConfig()
        self.selector = JpegSelector(self.config)

    def estimate_file(self, path: Path) -> QualityReport:
        """Estimate one file, recording any failure in the report."""
        path = Path(path)
        try:
            return QualityReport(path=path, quality=jpeg_quality(path))
        except JpegQualityError as e:
            logger.warning(f"Quality estimation failed: {path.name} - {e}")
            return QualityReport(path=path, error=str(e))

    def estimate_files(self, paths: List[Path]) -> List[QualityReport]:
        return [self.estimate_file(p) for p in paths]

    def estimate_folder(self, folder: Path, recursive: Optional[bool] = None) -> List[QualityReport]:
        """
        Estimate quality of all JPEG files in a folder.

        Args:
            folder: Folder to scan
            recursive: Override the configured recursion

        Returns:
            One report per file, in natural sort order
        """
        folder = Path(folder)
        logger.info(f"Estimating JPEG quality in: {folder.name}")

        images = self.selector.get_images(folder, recursive)
        if not images:
            raise ValueError(f"No JPEG images found in {folder}")

        return self.estimate_files(images)

    @staticmethod
    def summarize(reports: List[QualityReport]) -> Dict[str, Any]:
        """
        Aggregate batch results.

        Returns:
            Dict with count, failed, and min/max/mean quality (None when nothing succeeded)
        """
        qualities = np.array([r.quality for r in reports if r.ok], dtype=np.int64)
        summary: Dict[str, Any] = {
            "count": len(reports),
            "failed": sum(1 for r in reports if not r.ok),
            "min": None,
            "max": None,
            "mean": None,
        }
        if qualities.size:
            summary["min"] = int(qualities.min())
            summary["max"] = int(qualities.max())
            summary["mean"] = float(qualities.mean())
        return summary
