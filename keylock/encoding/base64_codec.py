"""
Base64 Encoding

Standard alphabet with '=' padding and no line wrapping. Input may be given
as text or as hex, and decoded output rendered as text or hex.
"""

import base64
import binascii

from .hex_codec import DataEncoding, bytes_to_text, strip_whitespace, text_to_bytes
from ..errors import CodecResult, EmptyInputError, FormatError, capture


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def base64_decode(text: str) -> bytes:
    """
    Decode Base64 text, ignoring whitespace.

    Raises:
        FormatError: On characters outside the alphabet or bad padding
    """
    try:
        return base64.b64decode(strip_whitespace(text), validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Invalid Base64 input: {e}") from e


class Base64Engine:
    """Result-returning boundary for Base64."""

    @staticmethod
    def _encode(data: str, input_encoding: DataEncoding) -> str:
        if not data.strip():
            raise EmptyInputError("Input data cannot be empty")
        return base64_encode(text_to_bytes(data, input_encoding))

    @staticmethod
    def _decode(data: str, output_encoding: DataEncoding) -> str:
        if not data.strip():
            raise EmptyInputError("Input data cannot be empty")
        return bytes_to_text(base64_decode(data), output_encoding)

    @classmethod
    def encode(cls, data: str, input_encoding: DataEncoding = DataEncoding.ASCII) -> CodecResult[str]:
        return capture("base64.encode", cls._encode, data, input_encoding)

    @classmethod
    def decode(cls, data: str, output_encoding: DataEncoding = DataEncoding.ASCII) -> CodecResult[str]:
        return capture("base64.decode", cls._decode, data, output_encoding)
