# KeyLock
"""
KeyLock - deterministic data encoding toolkit for payment cryptography work.

Sub-packages:
- encoding: hex, ASCII/EBCDIC, ATM decimal, BCD, Base94, Base64, padding
- asn1: DER codec for RSA public keys
- check_digit: Luhn and Amex SE
- message: hex dump formatting

Every engine class returns a CodecResult; the plain functions raise
CodecError subclasses (see errors.py).
"""

__version__ = "1.0.0"

from .errors import (
    CodecError,
    CodecResult,
    FormatError,
    InvalidBase94CharacterError,
    InvalidBCDNibbleError,
    InvalidBCDDigitError,
    EmptyInputError,
    UnsupportedEncodingError,
    InvalidDERError,
    InsufficientDigitsError,
)

__all__ = [
    '__version__',
    'CodecError',
    'CodecResult',
    'FormatError',
    'InvalidBase94CharacterError',
    'InvalidBCDNibbleError',
    'InvalidBCDDigitError',
    'EmptyInputError',
    'UnsupportedEncodingError',
    'InvalidDERError',
    'InsufficientDigitsError',
]
