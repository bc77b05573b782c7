"""
Shared data types and protocols for jpegquality components.
"""
from pathlib import Path
from typing import List, Optional, Protocol
from dataclasses import dataclass, field

import numpy as np


class ByteStream(Protocol):
    """Readable, seekable binary stream. Owned by the caller, never closed here."""

    def read(self, size: int = -1) -> bytes: ...

    def seek(self, offset: int, whence: int = 0) -> int: ...


@dataclass(frozen=True)
class QuantizationTable:
    """Payload of the first DQT segment: precision/id byte followed by coefficients."""
    payload: bytes
    is_8bit: bool

    @property
    def precision_bits(self) -> int:
        return 8 if self.is_8bit else 16

    @property
    def table_id(self) -> int:
        return self.payload[0] & 0x0F

    def values(self) -> np.ndarray:
        """
        The 64 coefficients of the first table in the payload, in stored (zigzag) order.

        Entries missing from a short payload are not padded.
        """
        if self.is_8bit:
            return np.frombuffer(self.payload[1:65], dtype=np.uint8).astype(np.int64)
        window = self.payload[1:129]
        window = window[:len(window) - len(window) % 2]
        return np.frombuffer(window, dtype=">u2").astype(np.int64)


@dataclass
class QualityReport:
    """Outcome of estimating one file in a batch."""
    path: Path
    quality: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.quality is not None


@dataclass
class BatchConfig:
    """Configuration for folder-level estimation."""
    recursive: bool = False
    extensions: List[str] = None
    ignored_folders: List[str] = field(default_factory=lambda: ['.previews', '.covers', '.thumbnails'])

    def __post_init__(self):
        if self.extensions is None:
            self.extensions = ['.jpg', '.jpeg', '.jpe', '.jfif']
        self.extensions = [ext.lower() if ext.startswith('.') else f".{ext.lower()}" for ext in self.extensions]
