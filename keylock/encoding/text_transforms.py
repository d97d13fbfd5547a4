"""
Character Encoding Conversions

Text-level transforms selected by CharacterEncodingType:
- Binary (Latin-1 text) <-> Hexadecimal
- ASCII <-> EBCDIC (code page 037)
- ASCII text -> Hexadecimal
- ATM ASCII decimal <-> Hexadecimal

ATM ASCII decimal is the form ATM hosts use for key material typed on a
keypad: every byte written as three decimal digits, e.g. "065066067" is "ABC".
"""

from enum import Enum
from typing import Callable, Dict

from .ebcdic import ascii_to_ebcdic, ebcdic_to_ascii
from .hex_codec import hex_decode, hex_encode, strip_whitespace
from ..errors import CodecResult, FormatError, UnsupportedEncodingError, capture


ATM_DECIMAL_WIDTH = 3
MAX_BYTE_VALUE = 255


class CharacterEncodingType(Enum):
    BINARY_TO_HEX = "Binary -> Hexadecimal"
    HEX_TO_BINARY = "Hexadecimal -> Binary"
    ASCII_TO_EBCDIC = "ASCII -> EBCDIC"
    EBCDIC_TO_ASCII = "EBCDIC -> ASCII"
    ASCII_TO_HEX = "ASCII Text -> Hexadecimal"
    ATM_ASCII_DEC_TO_HEX = "ATM ASCII Decimal -> Hexadecimal"
    HEX_TO_ATM_ASCII_DEC = "Hexadecimal -> ATM ASCII Decimal"

    @property
    def display_name(self) -> str:
        return self.value


def text_to_hex(text: str) -> str:
    """
    Encode text as ISO-8859-1 and return uppercase hex.

    Example:
        >>> text_to_hex("Hello")
        '48656C6C6F'
    """
    try:
        return hex_encode(text.encode('latin-1'))
    except UnicodeEncodeError as e:
        raise FormatError(f"Character not representable in ISO-8859-1: {text[e.start]!r}") from e


def hex_to_text(hex_text: str) -> str:
    """Decode hex to bytes and read them as ISO-8859-1 text."""
    return hex_decode(hex_text).decode('latin-1')


def atm_decimal_to_hex(atm_decimal: str) -> str:
    """
    Convert ATM 3-digit decimal ASCII to hex.

    Args:
        atm_decimal: Concatenated 3-digit groups, whitespace ignored

    Returns:
        Uppercase hex, one byte per group

    Raises:
        FormatError: Non-digit input, length not a multiple of 3,
            or a group above 255
    """
    cleaned = strip_whitespace(atm_decimal)
    if not all(c in '0123456789' for c in cleaned):
        raise FormatError("Invalid ATM ASCII Decimal - must contain only digits")
    if len(cleaned) % ATM_DECIMAL_WIDTH != 0:
        raise FormatError("ATM ASCII Decimal length must be multiple of 3")

    values = []
    for i in range(0, len(cleaned), ATM_DECIMAL_WIDTH):
        value = int(cleaned[i:i + ATM_DECIMAL_WIDTH])
        if value > MAX_BYTE_VALUE:
            raise FormatError(f"Invalid ASCII value: {value} (must be 0-255)")
        values.append(value)
    return hex_encode(bytes(values))


def hex_to_atm_decimal(hex_text: str) -> str:
    """Convert hex to ATM 3-digit decimal ASCII ("414243" -> "065066067")."""
    return ''.join(f"{b:03d}" for b in hex_decode(hex_text))


_CONVERTERS: Dict[CharacterEncodingType, Callable[[str], str]] = {
    CharacterEncodingType.BINARY_TO_HEX: text_to_hex,
    CharacterEncodingType.HEX_TO_BINARY: hex_to_text,
    CharacterEncodingType.ASCII_TO_EBCDIC: ascii_to_ebcdic,
    CharacterEncodingType.EBCDIC_TO_ASCII: ebcdic_to_ascii,
    CharacterEncodingType.ASCII_TO_HEX: text_to_hex,
    CharacterEncodingType.ATM_ASCII_DEC_TO_HEX: atm_decimal_to_hex,
    CharacterEncodingType.HEX_TO_ATM_ASCII_DEC: hex_to_atm_decimal,
}


def convert(encoding_type: CharacterEncodingType, text: str) -> str:
    converter = _CONVERTERS.get(encoding_type)
    if converter is None:
        raise UnsupportedEncodingError(f"Conversion not yet supported: {encoding_type.display_name}")
    return converter(text)


class CharacterEncodingEngine:
    """Result-returning boundary for the character encoding conversions."""

    @staticmethod
    def convert(encoding_type: CharacterEncodingType, text: str) -> CodecResult[str]:
        return capture(f"convert[{encoding_type.name}]", convert, encoding_type, text)
