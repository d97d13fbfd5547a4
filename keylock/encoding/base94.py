"""
Base94 Encoding

Encodes a whole byte buffer as one unsigned big-endian integer written in
base 94, using every printable ASCII character from '!' (33) to '~' (126).

Length preservation:
- The integer part alone would lose leading zero bytes, so one '!' (digit 0)
  is prepended per leading zero byte of the input.
- The value zero is written as a single '!' on top of that, so
  b"" -> "!", b"\\x00" -> "!!" and b"\\x00\\x41" differs from b"\\x41".

This is not a streaming format: the full string is needed before decoding.
"""

from .hex_codec import DataEncoding, bytes_to_text, text_to_bytes
from ..errors import CodecResult, EmptyInputError, InvalidBase94CharacterError, capture


BASE94_ALPHABET = ''.join(chr(c) for c in range(33, 127))
BASE = len(BASE94_ALPHABET)
ZERO_DIGIT = BASE94_ALPHABET[0]

_INDEX = {char: index for index, char in enumerate(BASE94_ALPHABET)}


def base94_encode(data: bytes) -> str:
    """
    Encode bytes to a Base94 string.

    Args:
        data: Any byte buffer, including empty

    Returns:
        Base94 text, never empty

    Example:
        >>> base94_encode(b"")
        '!'
    """
    value = int.from_bytes(data, 'big')

    digits = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        digits.append(BASE94_ALPHABET[remainder])
    if not digits:
        digits.append(ZERO_DIGIT)
    digits.reverse()

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ZERO_DIGIT * leading_zeros + ''.join(digits)


def base94_decode(text: str) -> bytes:
    """
    Decode a Base94 string to bytes.

    A leading run of '!' gives the number of leading zero bytes. When the
    whole string is '!' characters, the last one is the encoded zero value
    rather than a zero byte.

    Raises:
        InvalidBase94CharacterError: On any character outside the alphabet
        EmptyInputError: On an empty string
    """
    if not text:
        raise EmptyInputError("Input data cannot be empty")
    for char in text:
        if char not in _INDEX:
            raise InvalidBase94CharacterError(f"Invalid character in Base94 string: {char!r}")

    suffix = text.lstrip(ZERO_DIGIT)
    leading_zeros = len(text) - len(suffix)
    if not suffix:
        return b'\x00' * (leading_zeros - 1)

    value = 0
    for char in suffix:
        value = value * BASE + _INDEX[char]
    # suffix starts with a non-zero digit, so value > 0
    return b'\x00' * leading_zeros + value.to_bytes((value.bit_length() + 7) // 8, 'big')


class Base94Engine:
    """Result-returning boundary for Base94, taking text or hex input."""

    @staticmethod
    def _encode(data: str, input_encoding: DataEncoding) -> str:
        if not data.strip():
            raise EmptyInputError("Input data cannot be empty")
        return base94_encode(text_to_bytes(data, input_encoding))

    @staticmethod
    def _decode(data: str, output_encoding: DataEncoding) -> str:
        if not data.strip():
            raise EmptyInputError("Input data cannot be empty")
        return bytes_to_text(base94_decode(data), output_encoding)

    @classmethod
    def encode(cls, data: str, input_encoding: DataEncoding = DataEncoding.ASCII) -> CodecResult[str]:
        return capture("base94.encode", cls._encode, data, input_encoding)

    @classmethod
    def decode(cls, data: str, output_encoding: DataEncoding = DataEncoding.ASCII) -> CodecResult[str]:
        return capture("base94.decode", cls._decode, data, output_encoding)
