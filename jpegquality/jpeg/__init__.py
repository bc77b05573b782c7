"""
JPEG container scanning and quantization-table quality estimation.
"""
from .scanner import locate_luminance_dqt
from .estimator import REFERENCE_SUMS, coefficient_sum, quality_from_sum, estimate_quality

__all__ = [
    'locate_luminance_dqt',
    'REFERENCE_SUMS',
    'coefficient_sum',
    'quality_from_sum',
    'estimate_quality',
]
