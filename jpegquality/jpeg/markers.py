"""JPEG marker constants."""

MARKER_PREFIX = 0xFF

SOI = b'\xff\xd8'  # Start of image
EOI = b'\xff\xd9'  # End of image
SOS = b'\xff\xda'  # Start of scan
DQT = b'\xff\xdb'  # Define quantization table

# Segment length field: 2 bytes, big-endian, counts itself
LENGTH_FIELD_SIZE = 2

# Precision/id byte plus one full 8-bit table
MIN_DQT_PAYLOAD = 1 + 64

_NAMES = {
    0xC0: "SOF0", 0xC1: "SOF1", 0xC2: "SOF2", 0xC4: "DHT",
    0xD8: "SOI", 0xD9: "EOI", 0xDA: "SOS", 0xDB: "DQT",
    0xDD: "DRI", 0xFE: "COM",
}


def marker_name(marker: bytes) -> str:
    """Human readable name for a 2-byte marker, e.g. 'APP1' or 'DQT'."""
    code = marker[1]
    if 0xE0 <= code <= 0xEF:
        return f"APP{code - 0xE0}"
    return _NAMES.get(code, f"0x{marker.hex().upper()}")
