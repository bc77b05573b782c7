"""
Quality estimation from a luminance quantization table.
"""
from typing import Union

import numpy as np

# Luminance table sums for qualities 1..100 (index 0 is quality 1).
# Base table is Table K.1 of the JPEG standard, Annex K, scaled per quality.
REFERENCE_SUMS = (
    16320, 16316, 15954, 15287, 14674, 14094, 13645, 13247, 12886, 12586,
    12275, 11900, 11506, 11125, 10760, 10413, 10073, 9750, 9422, 9089,
    8739, 8405, 8067, 7745, 7440, 7156, 6893, 6647, 6424, 6212,
    6013, 5825, 5648, 5486, 5329, 5184, 5044, 4916, 4793, 4668,
    4566, 4460, 4354, 4252, 4161, 4072, 3993, 3906, 3819, 3752,
    3685, 3605, 3531, 3460, 3383, 3311, 3234, 3160, 3085, 3016,
    2938, 2868, 2791, 2721, 2643, 2573, 2501, 2426, 2354, 2275,
    2200, 2132, 2060, 1979, 1894, 1837, 1756, 1684, 1616, 1541,
    1462, 1390, 1315, 1243, 1169, 1095, 1025, 948, 878, 800,
    731, 656, 582, 505, 429, 356, 285, 211, 131, 64,
)

MIN_QUALITY = 1
MAX_QUALITY = 100


def coefficient_sum(payload: bytes, is_8bit: bool) -> Union[int, float]:
    """
    Sum the coefficient window of a DQT payload.

    The window starts one entry past the first coefficient and runs one
    entry past a single table: bytes ``1 + k`` (8-bit) or words at
    ``1 + 2k`` (16-bit) for k in 1..64. Entries beyond the payload count
    as zero. 16-bit sums are divided by 256 to land on the 8-bit scale.
    """
    if is_8bit:
        window = payload[2:66]
        return int(np.frombuffer(window, dtype=np.uint8).sum(dtype=np.int64))

    window = payload[3:131]
    window = window[:len(window) - len(window) % 2]
    return int(np.frombuffer(window, dtype=">u2").sum(dtype=np.int64)) / 256


def quality_from_sum(total: Union[int, float]) -> int:
    """Map a coefficient sum to the first quality whose reference sum exceeds it."""
    for i in range(MAX_QUALITY):
        if total < REFERENCE_SUMS[MAX_QUALITY - 1 - i]:
            return MAX_QUALITY - i
    return MIN_QUALITY


def estimate_quality(payload: bytes, is_8bit: bool) -> int:
    """
    Estimate JPEG quality (1-100) from a DQT payload.

    Args:
        payload: DQT segment payload, precision/id byte first
        is_8bit: True for 8-bit coefficients, False for 16-bit

    Returns:
        Estimated quality between 1 and 100
    """
    return quality_from_sum(coefficient_sum(payload, is_8bit))
