"""
RSA DER Public Key Codec

Encodes and decodes the PKCS#1 RSAPublicKey structure:

    RSAPublicKey ::= SEQUENCE {
        modulus         INTEGER,
        publicExponent  INTEGER
    }

Encoding rules:
- Lengths below 128 use the short form (one byte); longer ones use
  0x80 | n followed by n big-endian length bytes, with n minimal
- An INTEGER whose first content byte has the high bit set gets a 0x00
  prefix so it stays non-negative

Modulus sign convention:
    On decode, a modulus longer than one byte that starts with 0x00 is
    reported as modulus_negative and returned without that byte. This pairs
    with the encode path, where modulus_negative=True replaces the unsigned modulus by
    its two's-complement negation before encoding. It is this tool's own
    convention rather than DER signedness: a plain modulus with its high bit
    set (any real RSA key) also decodes with modulus_negative=True.

Input strings are turned into bytes first according to RSADataEncoding.
EBCDIC_HEX is currently read exactly like ASCII_HEX; no code page translation
is applied before DER parsing.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..encoding.base64_codec import base64_decode
from ..encoding.hex_codec import hex_decode, hex_encode
from ..errors import (
    CodecResult,
    EmptyInputError,
    FormatError,
    InvalidDERError,
    UnsupportedEncodingError,
    capture,
)


logger = logging.getLogger(__name__)

# ASN.1 tags
DER_TAG_INTEGER = 0x02
DER_TAG_SEQUENCE = 0x30

# Length octets
DER_SHORT_FORM_LIMIT = 0x80
DER_LONG_FORM_FLAG = 0x80
DER_MAX_LENGTH_BYTES = 4


class RSADataEncoding(Enum):
    """How the modulus, exponent or DER blob is written in the input field."""
    NONE = "None"
    ASCII = "ASCII"
    EBCDIC = "EBCDIC"
    BCD = "BCD"
    BCD_LEFT_F = "BCD_left_F"
    UTF_8 = "UTF_8"
    ASCII_HEX = "ASCII_HEX"
    ASCII_BASE64 = "ASCII_BASE64"
    EBCDIC_HEX = "EBCDIC_HEX"
    ASCII_ZERO_PADDED = "ASCII_zero_padded"
    BCD_SIGNED = "BCD_Signed"

    @property
    def display_name(self) -> str:
        return self.value


class RSADEREncoding(Enum):
    """DER variant selector. Accepted on every call; output does not depend on it yet."""
    UNKNOWN = "UNKNOWN"
    ENCODING_01_DER_ASN1_PUBLIC_KEY_UNSIGNED = "ENCODING_01_DER_ASN1_PUBLIC_KEY_UNSIGNED"
    ENCODING_02_DER_ASN1_PUBLIC_KEY_2S_COMPLIMENT = "ENCODING_02_DER_ASN1_PUBLIC_KEY_2S_COMPLIMENT"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class DERPublicKey:
    """Decoded RSA public key components."""
    modulus: bytes
    exponent: bytes
    modulus_negative: bool = False

    @property
    def modulus_hex(self) -> str:
        return hex_encode(self.modulus)

    @property
    def exponent_hex(self) -> str:
        return hex_encode(self.exponent)

    @property
    def modulus_int(self) -> int:
        """Modulus bytes read as an unsigned big-endian magnitude."""
        return int.from_bytes(self.modulus, 'big')

    @property
    def exponent_int(self) -> int:
        return int.from_bytes(self.exponent, 'big')

    def to_public_key(self) -> rsa.RSAPublicKey:
        """
        Build a cryptography RSA public key from the unsigned components.

        Raises:
            InvalidDERError: If the numbers are not a usable RSA key
        """
        try:
            return rsa.RSAPublicNumbers(self.exponent_int, self.modulus_int).public_key()
        except ValueError as e:
            raise InvalidDERError(f"Not a usable RSA public key: {e}") from e

    def to_pem(self) -> str:
        """Export as a SubjectPublicKeyInfo PEM block."""
        return self.to_public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode('ascii')

    @classmethod
    def from_public_key(cls, key: rsa.RSAPublicKey) -> 'DERPublicKey':
        numbers = key.public_numbers()
        return cls(
            modulus=_unsigned_bytes(numbers.n),
            exponent=_unsigned_bytes(numbers.e),
        )


# ============================================================================
# Integer helpers
# ============================================================================

def _unsigned_bytes(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), 'big')


def _signed_bytes(value: int) -> bytes:
    """Minimal big-endian two's-complement representation (at least one byte)."""
    magnitude_bits = value.bit_length() if value >= 0 else (~value).bit_length()
    return value.to_bytes(magnitude_bits // 8 + 1, 'big', signed=True)


def negate_twos_complement(data: bytes) -> bytes:
    """
    Negate an unsigned big-endian magnitude into minimal two's complement.

    0x010203 becomes 0xFEFDFD and 0xFF becomes 0xFF01. Any non-zero input
    yields a value with the high bit set.
    """
    return _signed_bytes(-int.from_bytes(data, 'big'))


# ============================================================================
# Input decoding
# ============================================================================

def _decode_ascii(data: str) -> bytes:
    try:
        return data.encode('ascii')
    except UnicodeEncodeError as e:
        raise FormatError(f"Non-ASCII character in input: {data[e.start]!r}") from e


_DATA_DECODERS: Dict[RSADataEncoding, Callable[[str], bytes]] = {
    RSADataEncoding.NONE: lambda data: data.encode('utf-8'),
    RSADataEncoding.ASCII: _decode_ascii,
    RSADataEncoding.UTF_8: lambda data: data.encode('utf-8'),
    RSADataEncoding.ASCII_HEX: hex_decode,
    RSADataEncoding.ASCII_BASE64: base64_decode,
    # TODO: translate through the code page 037 table once EBCDIC input fields exist
    RSADataEncoding.EBCDIC_HEX: hex_decode,
}


def decode_data(data: str, encoding: RSADataEncoding) -> bytes:
    """
    Turn an input field into bytes according to its encoding.

    Raises:
        UnsupportedEncodingError: For encodings not implemented yet
        FormatError: If the field is malformed for its encoding
    """
    decoder = _DATA_DECODERS.get(encoding)
    if decoder is None:
        raise UnsupportedEncodingError(f"Encoding format not yet supported: {encoding.display_name}")
    return decoder(data)


# ============================================================================
# DER encoding
# ============================================================================

def encode_length(length: int) -> bytes:
    """Encode a DER length in short or minimal long form."""
    if length < DER_SHORT_FORM_LIMIT:
        return bytes([length])
    length_bytes = _unsigned_bytes(length)
    return bytes([DER_LONG_FORM_FLAG | len(length_bytes)]) + length_bytes


def encode_integer(value: bytes) -> bytes:
    if value and value[0] & 0x80:
        value = b'\x00' + value
    return bytes([DER_TAG_INTEGER]) + encode_length(len(value)) + value


def encode_sequence(content: bytes) -> bytes:
    return bytes([DER_TAG_SEQUENCE]) + encode_length(len(content)) + content


def build_public_key_der(modulus: bytes, exponent: bytes) -> bytes:
    """SEQUENCE { INTEGER modulus, INTEGER exponent }."""
    return encode_sequence(encode_integer(modulus) + encode_integer(exponent))


# ============================================================================
# DER parsing
# ============================================================================

def parse_length(data: bytes, offset: int) -> Tuple[int, int]:
    """
    Parse a DER length at `offset`.

    Returns:
        Tuple of (length, bytes_consumed)

    Raises:
        InvalidDERError: Truncated, indefinite or oversized length
    """
    if offset >= len(data):
        raise InvalidDERError("Invalid DER: Truncated length")

    first = data[offset]
    if first < DER_SHORT_FORM_LIMIT:
        return first, 1

    count = first & 0x7F
    if count == 0:
        raise InvalidDERError("Invalid DER: Indefinite length not allowed")
    if count > DER_MAX_LENGTH_BYTES:
        raise InvalidDERError(f"Invalid DER: Length uses {count} bytes")
    if offset + 1 + count > len(data):
        raise InvalidDERError("Invalid DER: Truncated length")

    length = int.from_bytes(data[offset + 1:offset + 1 + count], 'big')
    return length, 1 + count


def parse_integer(data: bytes, offset: int) -> Tuple[bytes, int]:
    """
    Parse a DER INTEGER at `offset`.

    Returns:
        Tuple of (content bytes, bytes_consumed)
    """
    if offset >= len(data) or data[offset] != DER_TAG_INTEGER:
        raise InvalidDERError("Invalid DER: Expected INTEGER tag")

    length, length_size = parse_length(data, offset + 1)
    start = offset + 1 + length_size
    if start + length > len(data):
        raise InvalidDERError("Invalid DER: Truncated INTEGER")
    return data[start:start + length], 1 + length_size + length


def parse_public_key_der(data: bytes) -> DERPublicKey:
    """
    Parse SEQUENCE { INTEGER modulus, INTEGER exponent }.

    Trailing bytes after the two integers are ignored.

    Raises:
        InvalidDERError: On any structural violation
    """
    if not data or data[0] != DER_TAG_SEQUENCE:
        raise InvalidDERError("Invalid DER: Expected SEQUENCE tag")
    offset = 1

    seq_length, length_size = parse_length(data, offset)
    offset += length_size
    if offset + seq_length > len(data):
        raise InvalidDERError("Invalid DER: Truncated SEQUENCE")

    modulus, consumed = parse_integer(data, offset)
    offset += consumed
    exponent, _ = parse_integer(data, offset)

    modulus_negative = len(modulus) > 1 and modulus[0] == 0x00
    if modulus_negative:
        modulus = modulus[1:]

    return DERPublicKey(modulus=modulus, exponent=exponent, modulus_negative=modulus_negative)


# ============================================================================
# Public operations
# ============================================================================

def der_encode(
    modulus: str,
    modulus_encoding: RSADataEncoding,
    exponent: str,
    exponent_encoding: RSADataEncoding,
    modulus_negative: bool = False,
    der_encoding: RSADEREncoding = RSADEREncoding.UNKNOWN
) -> str:
    """
    Encode modulus and exponent fields as a DER public key.

    Args:
        modulus: Modulus field text
        modulus_encoding: How the modulus field is written
        exponent: Exponent field text
        exponent_encoding: How the exponent field is written
        modulus_negative: Negate the modulus (two's complement) before encoding
        der_encoding: DER variant selector

    Returns:
        DER bytes as uppercase hex

    Raises:
        EmptyInputError: If either field is blank
        UnsupportedEncodingError: For encodings not implemented yet
        FormatError: If a field is malformed
    """
    if not modulus.strip() or not exponent.strip():
        raise EmptyInputError("Modulus and Exponent cannot be empty")

    modulus_bytes = decode_data(modulus, modulus_encoding)
    exponent_bytes = decode_data(exponent, exponent_encoding)

    if modulus_negative:
        modulus_bytes = negate_twos_complement(modulus_bytes)

    der = build_public_key_der(modulus_bytes, exponent_bytes)
    logger.debug(
        "Encoded DER public key (%s): %d-byte modulus, %d-byte exponent",
        der_encoding.name, len(modulus_bytes), len(exponent_bytes)
    )
    return hex_encode(der)


def der_decode(
    data: str,
    data_encoding: RSADataEncoding,
    der_encoding: RSADEREncoding = RSADEREncoding.UNKNOWN
) -> DERPublicKey:
    """
    Decode a DER public key field into its components.

    Raises:
        EmptyInputError: If the field is blank
        UnsupportedEncodingError: For encodings not implemented yet
        FormatError: If the field is malformed for its encoding
        InvalidDERError: On any structural violation
    """
    if not data.strip():
        raise EmptyInputError("Data cannot be empty")

    key = parse_public_key_der(decode_data(data, data_encoding))
    logger.debug(
        "Decoded DER public key (%s): %d-byte modulus, negative=%s",
        der_encoding.name, len(key.modulus), key.modulus_negative
    )
    return key


class RSADERPublicKeyEngine:
    """Result-returning boundary for the DER public key codec."""

    @staticmethod
    def encode(
        modulus: str,
        modulus_encoding: RSADataEncoding,
        exponent: str,
        exponent_encoding: RSADataEncoding,
        modulus_negative: bool = False,
        der_encoding: RSADEREncoding = RSADEREncoding.UNKNOWN
    ) -> CodecResult[str]:
        return capture(
            "der.encode", der_encode,
            modulus, modulus_encoding, exponent, exponent_encoding,
            modulus_negative, der_encoding
        )

    @staticmethod
    def decode(
        data: str,
        data_encoding: RSADataEncoding,
        der_encoding: RSADEREncoding = RSADEREncoding.UNKNOWN
    ) -> CodecResult[DERPublicKey]:
        return capture("der.decode", der_decode, data, data_encoding, der_encoding)
