"""
Hexadecimal Codec

Converts between hex strings and byte buffers. Input is case-insensitive and
may contain whitespace; output is always uppercase with no separators.

Also provides the small byte helpers the other codecs share:
- Display grouping of hex digits
- XOR of equal-length buffers
- Decimalization (byte mod 10)
"""

import re
from enum import Enum

from ..errors import CodecResult, FormatError, capture


HEX_PATTERN = re.compile(r'^[0-9A-Fa-f]*$')
WHITESPACE = re.compile(r'\s+')
DEFAULT_GROUP_SIZE = 4


class DataEncoding(Enum):
    """How a textual input should be turned into bytes."""
    ASCII = "ASCII"
    HEXADECIMAL = "Hexadecimal"

    @property
    def display_name(self) -> str:
        return self.value


def strip_whitespace(text: str) -> str:
    return WHITESPACE.sub('', text)


def is_valid_hex(text: str) -> bool:
    """True if text is an even-length hex string once whitespace is removed."""
    cleaned = strip_whitespace(text)
    return bool(HEX_PATTERN.match(cleaned)) and len(cleaned) % 2 == 0


def hex_decode(text: str) -> bytes:
    """
    Decode a hex string to bytes.

    Args:
        text: Hex digits, any case, whitespace ignored

    Returns:
        Decoded bytes (empty for an empty string)

    Raises:
        FormatError: On a non-hex character or an odd digit count
    """
    cleaned = strip_whitespace(text).upper()
    if not HEX_PATTERN.match(cleaned):
        raise FormatError("Invalid hexadecimal string")
    if len(cleaned) % 2 != 0:
        raise FormatError("Hexadecimal string must have even length")
    return bytes.fromhex(cleaned)


def hex_encode(data: bytes) -> str:
    """Encode bytes as uppercase hex, two characters per byte."""
    return data.hex().upper()


def format_hex(text: str, group_size: int = DEFAULT_GROUP_SIZE) -> str:
    """Split a hex string into space-separated groups for display."""
    cleaned = strip_whitespace(text)
    return ' '.join(cleaned[i:i + group_size] for i in range(0, len(cleaned), group_size))


def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise FormatError("Arrays must have same length for XOR")
    return bytes(x ^ y for x, y in zip(a, b))


def decimalize(data: bytes) -> str:
    """Map every byte to a single decimal digit (value mod 10)."""
    return ''.join(str(byte % 10) for byte in data)


def text_to_bytes(data: str, encoding: DataEncoding) -> bytes:
    """
    Turn user input into bytes according to the selected input encoding.

    ASCII input is taken as UTF-8 text; HEXADECIMAL input is hex-decoded.
    """
    if encoding is DataEncoding.ASCII:
        return data.encode('utf-8')
    return hex_decode(data)


def bytes_to_text(data: bytes, encoding: DataEncoding) -> str:
    """Render decoded bytes as UTF-8 text or as uppercase hex."""
    if encoding is DataEncoding.ASCII:
        return data.decode('utf-8', errors='replace')
    return hex_encode(data)


class HexCodec:
    """Result-returning boundary for hex conversion."""

    @staticmethod
    def decode(text: str) -> CodecResult[bytes]:
        return capture("hex.decode", hex_decode, text)

    @staticmethod
    def encode(data: bytes) -> CodecResult[str]:
        return capture("hex.encode", hex_encode, data)
