"""
Unit tests for the RSA DER public key codec.

Tests:
- Length / INTEGER / SEQUENCE encoding
- Encode and decode with each supported input encoding
- Modulus sign convention
- Structural errors
- Interoperability with the cryptography library
"""

import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from keylock.errors import (
    EmptyInputError,
    FormatError,
    InvalidDERError,
    UnsupportedEncodingError,
)
from keylock.asn1.der_public_key import (
    DERPublicKey, RSADataEncoding, RSADEREncoding, RSADERPublicKeyEngine,
    der_encode, der_decode, encode_length, encode_integer, encode_sequence,
    negate_twos_complement, parse_public_key_der
)


HEX = RSADataEncoding.ASCII_HEX
SMALL_KEY_DER = "300A02030102030203010001"


@pytest.fixture(scope="module")
def rsa_public_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


class TestDEREncodingPrimitives:
    """Unit tests for length, INTEGER and SEQUENCE encoding."""

    def test_short_length(self):
        assert encode_length(0) == b"\x00"
        assert encode_length(127) == b"\x7f"

    def test_long_length_minimal(self):
        """Long form uses the fewest length bytes."""
        assert encode_length(128) == b"\x81\x80"
        assert encode_length(255) == b"\x81\xff"
        assert encode_length(256) == b"\x82\x01\x00"
        assert encode_length(65536) == b"\x83\x01\x00\x00"

    def test_integer_high_bit_padded(self):
        """0xFF is encoded as 00 FF so it stays positive."""
        assert encode_integer(b"\xff") == b"\x02\x02\x00\xff"

    def test_integer_no_padding(self):
        assert encode_integer(b"\x7f") == b"\x02\x01\x7f"

    def test_sequence(self):
        assert encode_sequence(b"\x02\x01\x01") == b"\x30\x03\x02\x01\x01"

    def test_negate(self):
        """Negation reads the input as an unsigned magnitude."""
        assert negate_twos_complement(b"\x01\x02\x03") == b"\xfe\xfd\xfd"
        assert negate_twos_complement(b"\xff") == b"\xff\x01"
        assert negate_twos_complement(b"\x00") == b"\x00"
        assert negate_twos_complement(b"\x80") == b"\x80"

    def test_negate_sets_high_bit(self):
        for data in (b"\x01", b"\x7f", b"\xc0\xff\xee", b"\xa1" * 256):
            negated = negate_twos_complement(data)
            assert negated[0] & 0x80
            assert int.from_bytes(negated, 'big', signed=True) == -int.from_bytes(data, 'big')


class TestDEREncode:
    """Unit tests for der_encode."""

    def test_small_key(self):
        assert der_encode("010203", HEX, "010001", HEX) == SMALL_KEY_DER

    def test_high_bit_modulus(self):
        """Modulus FF gets INTEGER content 00 FF of length 2."""
        assert der_encode("FF", HEX, "03", HEX) == "3007020200FF020103"

    def test_ascii_fields(self):
        assert der_encode("AB", RSADataEncoding.ASCII, "C", RSADataEncoding.ASCII) == "300702024142020143"

    def test_utf8_and_none_fields(self):
        expected = "300702024142020143"
        assert der_encode("AB", RSADataEncoding.UTF_8, "C", RSADataEncoding.NONE) == expected

    def test_base64_fields(self):
        modulus = base64.b64encode(b"\x01\x02\x03").decode()
        exponent = base64.b64encode(b"\x01\x00\x01").decode()
        encoding = RSADataEncoding.ASCII_BASE64
        assert der_encode(modulus, encoding, exponent, encoding) == SMALL_KEY_DER

    def test_ebcdic_hex_reads_as_hex(self):
        """EBCDIC_HEX applies no code page translation."""
        encoding = RSADataEncoding.EBCDIC_HEX
        assert der_encode("010203", encoding, "010001", encoding) == SMALL_KEY_DER

    def test_negative_modulus(self):
        """Negated 010203 is FEFDFD, which then needs the 00 prefix."""
        assert der_encode("010203", HEX, "010001", HEX, modulus_negative=True) == "300B020400FEFDFD0203010001"

    def test_long_form_lengths(self):
        modulus = "7F" * 200
        der = bytes.fromhex(der_encode(modulus, HEX, "03", HEX))
        assert der[:4] == b"\x30\x81\xce\x02"
        assert der[4:6] == b"\x81\xc8"

    def test_der_variant_does_not_change_output(self):
        for variant in RSADEREncoding:
            assert der_encode("010203", HEX, "010001", HEX, der_encoding=variant) == SMALL_KEY_DER

    def test_blank_modulus(self):
        with pytest.raises(EmptyInputError):
            der_encode("  ", HEX, "010001", HEX)

    def test_blank_exponent(self):
        with pytest.raises(EmptyInputError):
            der_encode("010203", HEX, "", HEX)

    @pytest.mark.parametrize("encoding", [
        RSADataEncoding.EBCDIC,
        RSADataEncoding.BCD,
        RSADataEncoding.BCD_LEFT_F,
        RSADataEncoding.ASCII_ZERO_PADDED,
        RSADataEncoding.BCD_SIGNED,
    ])
    def test_unsupported_encoding(self, encoding):
        with pytest.raises(UnsupportedEncodingError):
            der_encode("010203", encoding, "010001", HEX)

    def test_malformed_hex(self):
        with pytest.raises(FormatError):
            der_encode("01020", HEX, "010001", HEX)

    def test_non_ascii_in_ascii_field(self):
        with pytest.raises(FormatError):
            der_encode("é", RSADataEncoding.ASCII, "01", HEX)


class TestDERDecode:
    """Unit tests for der_decode."""

    def test_roundtrip(self):
        """decode(encode(M, E)) returns M and E unchanged."""
        key = der_decode(der_encode("010203", HEX, "010001", HEX), HEX)
        assert key == DERPublicKey(modulus=b"\x01\x02\x03", exponent=b"\x01\x00\x01", modulus_negative=False)

    def test_negative_roundtrip(self):
        """A negated modulus decodes as negative with the negated bytes."""
        key = der_decode(der_encode("010203", HEX, "010001", HEX, modulus_negative=True), HEX)
        assert key.modulus_negative
        assert key.modulus == negate_twos_complement(b"\x01\x02\x03")
        assert key.exponent == b"\x01\x00\x01"

    @pytest.mark.parametrize("modulus", ["FF", "80", "C0FFEE", "A1" * 256])
    def test_negative_roundtrip_high_bit_modulus(self, modulus):
        """High-bit moduli keep the negative flag through a round trip."""
        der = der_encode(modulus, HEX, "010001", HEX, modulus_negative=True)
        key = der_decode(der, HEX)
        assert key.modulus_negative
        assert key.modulus == negate_twos_complement(bytes.fromhex(modulus))
        assert int.from_bytes(key.modulus, 'big', signed=True) == -int(modulus, 16)

    def test_negative_ff_modulus_der(self):
        assert der_encode("FF", HEX, "010001", HEX, modulus_negative=True) == "300A020300FF010203010001"

    def test_single_zero_byte_modulus_not_negative(self):
        """A one-byte 00 modulus is just zero."""
        key = parse_public_key_der(bytes.fromhex("3006020100020103"))
        assert not key.modulus_negative
        assert key.modulus == b"\x00"

    def test_hex_properties(self):
        key = der_decode(SMALL_KEY_DER, HEX)
        assert key.modulus_hex == "010203"
        assert key.exponent_hex == "010001"
        assert key.exponent_int == 65537

    def test_base64_input(self):
        data = base64.b64encode(bytes.fromhex(SMALL_KEY_DER)).decode()
        key = der_decode(data, RSADataEncoding.ASCII_BASE64)
        assert key.modulus == b"\x01\x02\x03"

    def test_expected_sequence(self):
        with pytest.raises(InvalidDERError, match="Expected SEQUENCE"):
            der_decode("310A02030102030203010001", HEX)

    def test_expected_integer(self):
        with pytest.raises(InvalidDERError, match="Expected INTEGER"):
            der_decode("300A03030102030203010001", HEX)

    def test_truncated_sequence(self):
        with pytest.raises(InvalidDERError, match="Truncated"):
            der_decode("300A020301", HEX)

    def test_truncated_integer(self):
        with pytest.raises(InvalidDERError, match="Truncated"):
            der_decode("3005020501020302", HEX)

    def test_missing_exponent(self):
        with pytest.raises(InvalidDERError, match="Expected INTEGER"):
            der_decode("3005020301020300", HEX)

    def test_indefinite_length(self):
        with pytest.raises(InvalidDERError, match="Indefinite"):
            der_decode("3080020101020101", HEX)

    def test_only_tag(self):
        with pytest.raises(InvalidDERError):
            der_decode("30", HEX)

    def test_blank_input(self):
        with pytest.raises(EmptyInputError):
            der_decode(" ", HEX)

    def test_unsupported_encoding(self):
        with pytest.raises(UnsupportedEncodingError):
            der_decode(SMALL_KEY_DER, RSADataEncoding.BCD)


class TestRSADERPublicKeyEngine:
    """Result-returning boundary."""

    def test_encode_success(self):
        result = RSADERPublicKeyEngine.encode("010203", HEX, "010001", HEX)
        assert result.success
        assert result.value == SMALL_KEY_DER

    def test_decode_failure_is_wrapped(self):
        result = RSADERPublicKeyEngine.decode("31", HEX)
        assert not result.success
        assert result.value is None
        assert result.kind == "InvalidDER"
        assert "Expected SEQUENCE" in result.message

    def test_unwrap_reraises(self):
        result = RSADERPublicKeyEngine.encode("", HEX, "01", HEX)
        with pytest.raises(EmptyInputError):
            result.unwrap()


class TestCryptographyInterop:
    """Cross-checks against PKCS#1 DER produced by the cryptography library."""

    def test_encode_matches_pkcs1(self, rsa_public_key):
        numbers = rsa_public_key.public_numbers()
        expected = rsa_public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1
        )
        modulus_hex = numbers.n.to_bytes(256, 'big').hex()
        exponent_hex = numbers.e.to_bytes(3, 'big').hex()
        assert der_encode(modulus_hex, HEX, exponent_hex, HEX) == expected.hex().upper()

    def test_decode_pkcs1(self, rsa_public_key):
        """A real modulus has its high bit set, so it decodes as negative."""
        numbers = rsa_public_key.public_numbers()
        der = rsa_public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1
        )
        key = der_decode(der.hex(), HEX)
        assert key.modulus_negative
        assert len(key.modulus) == 256
        assert key.modulus_int == numbers.n
        assert key.exponent_int == numbers.e

    def test_to_public_key(self, rsa_public_key):
        der = rsa_public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1
        )
        key = der_decode(der.hex(), HEX)
        assert key.to_public_key().public_numbers() == rsa_public_key.public_numbers()

    def test_to_pem(self, rsa_public_key):
        key = DERPublicKey.from_public_key(rsa_public_key)
        pem = key.to_pem()
        assert pem.startswith("-----BEGIN PUBLIC KEY-----")
        loaded = serialization.load_pem_public_key(pem.encode())
        assert loaded.public_numbers() == rsa_public_key.public_numbers()

    def test_from_public_key(self, rsa_public_key):
        key = DERPublicKey.from_public_key(rsa_public_key)
        assert not key.modulus_negative
        assert key.modulus_int == rsa_public_key.public_numbers().n
        assert key.exponent == b"\x01\x00\x01"

    def test_unusable_key_rejected(self):
        """An even modulus is not an RSA key."""
        key = DERPublicKey(modulus=b"\x04", exponent=b"\x03")
        with pytest.raises(InvalidDERError):
            key.to_public_key()
