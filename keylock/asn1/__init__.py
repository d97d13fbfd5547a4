# ASN.1 Module
"""
ASN.1 DER codec for RSA public keys (PKCS#1 RSAPublicKey):
- DER length / INTEGER / SEQUENCE encoding
- Structural parsing with truncation checks
- Pluggable input encodings (ASCII, UTF-8, hex, Base64, EBCDIC hex)
"""

from .der_public_key import (
    RSADataEncoding,
    RSADEREncoding,
    DERPublicKey,
    RSADERPublicKeyEngine,
    der_encode,
    der_decode,
    decode_data,
    encode_length,
    encode_integer,
    encode_sequence,
    build_public_key_der,
    parse_length,
    parse_integer,
    parse_public_key_der,
    negate_twos_complement,
)

__all__ = [
    'RSADataEncoding',
    'RSADEREncoding',
    'DERPublicKey',
    'RSADERPublicKeyEngine',
    'der_encode',
    'der_decode',
    'decode_data',
    'encode_length',
    'encode_integer',
    'encode_sequence',
    'build_public_key_der',
    'parse_length',
    'parse_integer',
    'parse_public_key_der',
    'negate_twos_complement',
]
