# Encoding Module
"""
Text <-> byte codecs:
- Hexadecimal - hex_codec.py
- ASCII / ATM decimal / EBCDIC conversions - text_transforms.py, ebcdic.py
- BCD (binary, hex and packed) - bcd.py
- Base94 and Base64 - base94.py, base64_codec.py
- Block padding helpers - padding.py
"""

from .hex_codec import (
    DataEncoding,
    HexCodec,
    hex_decode,
    hex_encode,
    is_valid_hex,
    format_hex,
    xor_bytes,
    decimalize,
)

from .ebcdic import (
    ASCII_TO_EBCDIC,
    EBCDIC_TO_ASCII,
    ascii_to_ebcdic,
    ebcdic_to_ascii,
    round_trips,
)

from .text_transforms import (
    CharacterEncodingType,
    CharacterEncodingEngine,
    text_to_hex,
    hex_to_text,
    atm_decimal_to_hex,
    hex_to_atm_decimal,
)

from .bcd import (
    BCDFormat,
    BCDEngine,
    bcd_encode,
    bcd_decode,
    pack_bcd,
    unpack_bcd,
)

from .base94 import (
    BASE94_ALPHABET,
    Base94Engine,
    base94_encode,
    base94_decode,
)

from .base64_codec import (
    Base64Engine,
    base64_encode,
    base64_decode,
)

from .padding import (
    pad_pkcs7,
    unpad_pkcs7,
    pad_iso7816_4,
    unpad_iso7816_4,
    pad_zero,
)

__all__ = [
    # Hex
    'DataEncoding',
    'HexCodec',
    'hex_decode',
    'hex_encode',
    'is_valid_hex',
    'format_hex',
    'xor_bytes',
    'decimalize',
    # EBCDIC
    'ASCII_TO_EBCDIC',
    'EBCDIC_TO_ASCII',
    'ascii_to_ebcdic',
    'ebcdic_to_ascii',
    'round_trips',
    # Character conversions
    'CharacterEncodingType',
    'CharacterEncodingEngine',
    'text_to_hex',
    'hex_to_text',
    'atm_decimal_to_hex',
    'hex_to_atm_decimal',
    # BCD
    'BCDFormat',
    'BCDEngine',
    'bcd_encode',
    'bcd_decode',
    'pack_bcd',
    'unpack_bcd',
    # Base94 / Base64
    'BASE94_ALPHABET',
    'Base94Engine',
    'base94_encode',
    'base94_decode',
    'Base64Engine',
    'base64_encode',
    'base64_decode',
    # Padding
    'pad_pkcs7',
    'unpad_pkcs7',
    'pad_iso7816_4',
    'unpad_iso7816_4',
    'pad_zero',
]
