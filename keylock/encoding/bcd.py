"""
Binary Coded Decimal (BCD)

Each decimal digit 0-9 is a 4-bit nibble 0000-1001. Two textual forms are
supported, selected by BCDFormat:
- BINARY: nibbles written as bits, space separated ("25" -> "0010 0101")
- HEXADECIMAL: nibbles written as hex digits, which for valid BCD are the
  decimal digits themselves ("25" -> "25")

Packed BCD bytes (two digits per byte) are handled by pack_bcd / unpack_bcd.
"""

from enum import Enum

from .hex_codec import strip_whitespace
from ..errors import (
    CodecResult,
    FormatError,
    InvalidBCDDigitError,
    InvalidBCDNibbleError,
    capture,
)


NIBBLE_BITS = 4
MAX_BCD_DIGIT = 9
PAD_NIBBLES = ('0', 'F')
DECIMAL_DIGITS = frozenset('0123456789')
HEX_DIGITS = frozenset('0123456789ABCDEF')


class BCDFormat(Enum):
    BINARY = "Binary"
    HEXADECIMAL = "Hexadecimal"

    @property
    def display_name(self) -> str:
        return self.value


def _require_digits(text: str) -> str:
    cleaned = strip_whitespace(text)
    if not all(c in DECIMAL_DIGITS for c in cleaned):
        raise FormatError("Input must contain only digits")
    return cleaned


def bcd_encode(decimal: str, bcd_format: BCDFormat) -> str:
    """
    Encode a decimal digit string to BCD text.

    Args:
        decimal: Digits 0-9, whitespace ignored
        bcd_format: BINARY or HEXADECIMAL output

    Returns:
        "0010 0101" style bit groups, or the digit string unchanged

    Raises:
        FormatError: If the input contains a non-digit
    """
    digits = _require_digits(decimal)
    if bcd_format is BCDFormat.BINARY:
        return ' '.join(format(int(d), '04b') for d in digits)
    return digits


def _decode_binary(data: str) -> str:
    cleaned = strip_whitespace(data)
    if not all(c in '01' for c in cleaned):
        raise FormatError("Invalid binary BCD - must contain only 0 and 1")
    if len(cleaned) % NIBBLE_BITS != 0:
        raise FormatError("Binary BCD length must be multiple of 4")

    digits = []
    for i in range(0, len(cleaned), NIBBLE_BITS):
        nibble = cleaned[i:i + NIBBLE_BITS]
        value = int(nibble, 2)
        if value > MAX_BCD_DIGIT:
            raise InvalidBCDNibbleError(f"Invalid BCD nibble: {nibble} (value {value} > 9)")
        digits.append(str(value))
    return ''.join(digits)


def _decode_hex(data: str) -> str:
    cleaned = strip_whitespace(data).upper()
    if not all(c in HEX_DIGITS for c in cleaned):
        raise FormatError("Invalid hexadecimal BCD")
    for digit in cleaned:
        if digit not in DECIMAL_DIGITS:
            raise InvalidBCDDigitError(f"Invalid BCD hex digit: {digit} (must be 0-9)")
    return cleaned


def bcd_decode(data: str, bcd_format: BCDFormat) -> str:
    """
    Decode BCD text back to a decimal digit string.

    Raises:
        FormatError: Wrong alphabet, or binary length not a multiple of 4
        InvalidBCDNibbleError: A binary nibble above 1001
        InvalidBCDDigitError: A hex digit A-F
    """
    if bcd_format is BCDFormat.BINARY:
        return _decode_binary(data)
    return _decode_hex(data)


def pack_bcd(decimal: str, pad: str = '0') -> bytes:
    """
    Pack decimal digits two per byte.

    An odd digit count is left padded with `pad`, which is '0' for plain
    packed BCD or 'F' for the left-F variant used on card data.
    """
    digits = _require_digits(decimal)
    pad = pad.upper()
    if pad not in PAD_NIBBLES:
        raise FormatError(f"Pad nibble must be one of {', '.join(PAD_NIBBLES)}")
    if len(digits) % 2 != 0:
        digits = pad + digits
    return bytes.fromhex(digits)


def unpack_bcd(data: bytes) -> str:
    """Unpack packed BCD bytes to digits, dropping a leading F pad nibble."""
    nibbles = data.hex().upper()
    if nibbles.startswith('F'):
        nibbles = nibbles[1:]
    for digit in nibbles:
        if digit not in DECIMAL_DIGITS:
            raise InvalidBCDNibbleError(f"Invalid BCD nibble: {digit} (value {int(digit, 16)} > 9)")
    return nibbles


class BCDEngine:
    """Result-returning boundary for BCD conversion."""

    @staticmethod
    def encode(decimal: str, bcd_format: BCDFormat) -> CodecResult[str]:
        return capture("bcd.encode", bcd_encode, decimal, bcd_format)

    @staticmethod
    def decode(data: str, bcd_format: BCDFormat) -> CodecResult[str]:
        return capture("bcd.decode", bcd_decode, data, bcd_format)
