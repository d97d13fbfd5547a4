"""
Unit tests for check digit algorithms.

Tests:
- Luhn generate / verify
- Amex SE generate / check
- Engine dispatch and failure wrapping
"""

import pytest

from keylock.errors import EmptyInputError, FormatError, InsufficientDigitsError
from keylock.check_digit.check_digit import (
    AMEX_SE_NO_CHECK_DIGIT, CheckDigitEngine, CheckDigitMethod,
    generate_luhn, verify_luhn, generate_amex_se, check_amex_se
)


class TestLuhn:
    """Unit tests for Luhn (MOD 10)."""

    def test_generate_classic_vector(self):
        """7992739871 has check digit 3."""
        assert generate_luhn("7992739871") == "3"

    def test_verify_classic_vector(self):
        assert verify_luhn("79927398713")

    def test_verify_wrong_check_digit(self):
        assert not verify_luhn("79927398710")

    def test_card_number(self):
        """Well-known test PAN."""
        assert verify_luhn("4111111111111111")
        assert generate_luhn("411111111111111") == "1"

    def test_generate_then_verify(self):
        """Appending the generated digit always verifies."""
        for payload in ["0", "1", "12", "123456789", "5555555555554444"[:-1]]:
            assert verify_luhn(payload + generate_luhn(payload))

    def test_whitespace_ignored(self):
        assert generate_luhn("7992 7398 71") == "3"

    def test_non_digit_rejected(self):
        with pytest.raises(FormatError):
            generate_luhn("79927A")

    def test_empty_rejected(self):
        with pytest.raises(EmptyInputError):
            verify_luhn("")


class TestAmexSE:
    """Unit tests for Amex SE (MOD 9)."""

    def test_generate(self):
        """1+2+3+4+5+6+7+9 = 37, 37 mod 9 = 1."""
        assert generate_amex_se("12345679") == "1"

    def test_generate_sentinel(self):
        """Digit sum 36 is a multiple of 9."""
        assert generate_amex_se("12345678") == AMEX_SE_NO_CHECK_DIGIT
        assert generate_amex_se("12345678") == "-1"

    def test_generate_ignores_extra_digits(self):
        assert generate_amex_se("12345679999") == generate_amex_se("12345679")

    def test_generate_too_short(self):
        with pytest.raises(InsufficientDigitsError):
            generate_amex_se("1234567")

    def test_check_valid(self):
        assert check_amex_se("123456791")

    def test_check_wrong_digit(self):
        assert not check_amex_se("123456792")

    def test_check_sentinel_case_fails(self):
        """A zero remainder never verifies."""
        assert not check_amex_se("123456780")
        assert not check_amex_se("123456789")

    def test_check_without_ninth_digit(self):
        assert not check_amex_se("12345679")

    def test_check_too_short(self):
        with pytest.raises(InsufficientDigitsError):
            check_amex_se("1234567")


class TestCheckDigitEngine:
    """Engine dispatch on CheckDigitMethod."""

    def test_generate_luhn(self):
        result = CheckDigitEngine.generate("7992739871", CheckDigitMethod.LUHN)
        assert result.success
        assert result.value == "3"

    def test_check_amex(self):
        assert CheckDigitEngine.check("123456791", CheckDigitMethod.AMEX_SE).value is True

    def test_failure_wrapped(self):
        result = CheckDigitEngine.check("1234", CheckDigitMethod.AMEX_SE)
        assert not result.success
        assert result.kind == "InsufficientDigits"

    def test_blank_input(self):
        result = CheckDigitEngine.generate("   ", CheckDigitMethod.LUHN)
        assert result.kind == "EmptyInput"

    def test_every_method_dispatches(self):
        for method in CheckDigitMethod:
            assert CheckDigitEngine.generate("123456789", method).success
