"""
Pytest configuration and fixtures for jpegquality tests.
"""
import io
import struct
import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image


SOI = b'\xff\xd8'
EOI = b'\xff\xd9'
SOS = b'\xff\xda'
DQT = b'\xff\xdb'
APP0 = b'\xff\xe0'
APP1 = b'\xff\xe1'
COM = b'\xff\xfe'

JFIF_PAYLOAD = b'JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'


def _segment(marker: bytes, payload: bytes) -> bytes:
    return marker + struct.pack('>H', len(payload) + 2) + payload


def _table_with_sum(total: int) -> list:
    """64 coefficients whose entries 1..63 add up to ``total`` (entry 0 is 16)."""
    base, rem = divmod(total, 63)
    return [16] + [base + 1] * rem + [base] * (63 - rem)


def _dqt_payload(values: list, sixteen_bit: bool = False, table_id: int = 0) -> bytes:
    if sixteen_bit:
        return bytes([0x10 | table_id]) + b''.join(struct.pack('>H', v) for v in values)
    return bytes([table_id]) + bytes(values)


def _jpeg_stream(*segments: bytes, tail: bytes = SOS) -> bytes:
    return SOI + b''.join(segments) + tail


@pytest.fixture
def segment():
    """Build a marker segment: marker + length + payload."""
    return _segment


@pytest.fixture
def table_with_sum():
    return _table_with_sum


@pytest.fixture
def dqt_payload():
    """Build a DQT payload from 64 coefficient values."""
    return _dqt_payload


@pytest.fixture
def jpeg_stream():
    """Concatenate SOI, segments and a trailing marker into JPEG bytes."""
    return _jpeg_stream


@pytest.fixture
def make_jpeg():
    """Encode a small image with Pillow and return the JPEG bytes."""
    def _make(quality: int, mode: str = "RGB", size=(64, 48), **kwargs) -> bytes:
        buf = io.BytesIO()
        img = Image.new(mode, size, color="blue" if mode == "RGB" else 128)
        img.save(buf, "JPEG", quality=quality, **kwargs)
        return buf.getvalue()
    return _make


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="jpegquality_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_image(temp_dir) -> Path:
    """Create a sample JPEG saved at quality 90."""
    image_path = temp_dir / "test_image.jpg"
    img = Image.new("RGB", (800, 600), color="blue")
    img.save(image_path, "JPEG", quality=90)
    return image_path


@pytest.fixture
def sample_image_set(temp_dir) -> Path:
    """Create a folder of JPEGs saved at different qualities."""
    set_dir = temp_dir / "test_set"
    set_dir.mkdir()

    qualities = [75, 80, 85, 90, 95]
    colors = ["red", "green", "blue", "yellow", "purple"]

    for i, (quality, color) in enumerate(zip(qualities, colors)):
        img_path = set_dir / f"image_{i + 1}.jpg"
        img = Image.new("RGB", (320, 240), color=color)
        img.save(img_path, "JPEG", quality=quality)

    return set_dir


@pytest.fixture
def png_image(temp_dir) -> Path:
    """Create a PNG image with transparency."""
    image_path = temp_dir / "transparent.png"
    img = Image.new("RGBA", (400, 400), color=(255, 0, 0, 128))
    img.save(image_path, "PNG")
    return image_path


@pytest.fixture
def empty_dir(temp_dir) -> Path:
    """Create an empty directory."""
    empty = temp_dir / "empty"
    empty.mkdir()
    return empty
