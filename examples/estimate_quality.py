"""
Example: JPEG Quality Estimation with jpegquality

This example demonstrates how to:
- Estimate the quality of a single file
- Estimate every JPEG in a folder and print a summary
"""
from pathlib import Path
from jpegquality import (
    jpeg_quality,
    JpegQualityError,
    BatchEstimator,
    BatchConfig,
    ImageInfo,
)


def estimate_single_file(path: Path):
    """Estimate quality of one image and show its metadata."""
    try:
        quality = jpeg_quality(path)
    except JpegQualityError as e:
        print(f"{path.name}: {e}")
        return None

    info = ImageInfo(path)
    info.load()
    print(f"{path.name}: quality {quality} ({info.width}x{info.height}, {info.mode})")
    return quality


def estimate_folder(folder: Path, recursive: bool = False):
    """Estimate quality of every JPEG in a folder."""
    estimator = BatchEstimator(BatchConfig(recursive=recursive))

    reports = estimator.estimate_folder(folder)
    for report in reports:
        status = report.quality if report.ok else f"failed ({report.error})"
        print(f"{report.path.relative_to(folder)}: {status}")

    summary = estimator.summarize(reports)
    print(f"{summary['count']} files, {summary['failed']} failed")
    if summary["mean"] is not None:
        print(f"Quality range: {summary['min']}-{summary['max']}, mean {summary['mean']:.1f}")

    return reports


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python estimate_quality.py <file_or_folder> [--recursive]")
        sys.exit(1)

    target = Path(sys.argv[1])
    if not target.exists():
        print(f"Not found: {target}")
        sys.exit(1)

    if target.is_dir():
        estimate_folder(target, recursive="--recursive" in sys.argv[2:])
    else:
        estimate_single_file(target)
