"""
Check Digit Algorithms

- Luhn (MOD 10): card numbers and most payment identifiers
- Amex SE (MOD 9): American Express Service Establishment numbers

Amex SE only looks at the first 8 digits. When their digit sum is a multiple
of 9 no non-zero check digit exists; generation returns the sentinel "-1"
and verification fails.
"""

from enum import Enum

from ..encoding.hex_codec import strip_whitespace
from ..errors import (
    CodecResult,
    EmptyInputError,
    FormatError,
    InsufficientDigitsError,
    capture,
)


LUHN_MODULUS = 10
AMEX_SE_MODULUS = 9
AMEX_SE_DATA_DIGITS = 8
AMEX_SE_NO_CHECK_DIGIT = "-1"
DECIMAL_DIGITS = frozenset('0123456789')


class CheckDigitMethod(Enum):
    LUHN = "Luhn's number (MOD 10)"
    AMEX_SE = "Amex SE Number (MOD 9)"

    @property
    def display_name(self) -> str:
        return self.value


def _clean_digits(digits: str) -> str:
    cleaned = strip_whitespace(digits)
    if not all(c in DECIMAL_DIGITS for c in cleaned):
        raise FormatError("Input must contain only digits")
    if not cleaned:
        raise EmptyInputError("Input cannot be empty")
    return cleaned


def _luhn_sum(digits: str, double_rightmost: bool) -> int:
    total = 0
    double = double_rightmost
    for char in reversed(digits):
        digit = int(char)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return total


def generate_luhn(digits: str) -> str:
    """
    Compute the Luhn check digit to append to `digits`.

    The rightmost payload digit is doubled first, since the check digit will
    sit to its right.

    Example:
        >>> generate_luhn("7992739871")
        '3'
    """
    cleaned = _clean_digits(digits)
    total = _luhn_sum(cleaned, double_rightmost=True)
    return str((LUHN_MODULUS - total % LUHN_MODULUS) % LUHN_MODULUS)


def verify_luhn(digits: str) -> bool:
    """Check a number whose last digit is its Luhn check digit."""
    cleaned = _clean_digits(digits)
    return _luhn_sum(cleaned, double_rightmost=False) % LUHN_MODULUS == 0


def _amex_se_remainder(digits: str) -> int:
    if len(digits) < AMEX_SE_DATA_DIGITS:
        raise InsufficientDigitsError(
            f"Amex SE requires at least {AMEX_SE_DATA_DIGITS} digits, got {len(digits)}"
        )
    return sum(int(c) for c in digits[:AMEX_SE_DATA_DIGITS]) % AMEX_SE_MODULUS


def generate_amex_se(digits: str) -> str:
    """
    Compute the Amex SE check digit over the first 8 digits.

    Digits past the eighth are ignored.

    Returns:
        The remainder as a string, or "-1" when the remainder is 0
    """
    remainder = _amex_se_remainder(_clean_digits(digits))
    if remainder == 0:
        return AMEX_SE_NO_CHECK_DIGIT
    return str(remainder)


def check_amex_se(digits: str) -> bool:
    """
    Verify an Amex SE number: the 9th digit must equal the MOD 9 remainder
    of the first 8. A zero remainder never verifies.
    """
    cleaned = _clean_digits(digits)
    remainder = _amex_se_remainder(cleaned)
    if remainder == 0:
        return False
    if len(cleaned) <= AMEX_SE_DATA_DIGITS:
        return False
    return remainder == int(cleaned[AMEX_SE_DATA_DIGITS])


class CheckDigitEngine:
    """Result-returning boundary dispatching on CheckDigitMethod."""

    _GENERATORS = {
        CheckDigitMethod.LUHN: generate_luhn,
        CheckDigitMethod.AMEX_SE: generate_amex_se,
    }

    _CHECKERS = {
        CheckDigitMethod.LUHN: verify_luhn,
        CheckDigitMethod.AMEX_SE: check_amex_se,
    }

    @classmethod
    def generate(cls, digits: str, method: CheckDigitMethod) -> CodecResult[str]:
        return capture(f"check_digit.generate[{method.name}]", cls._GENERATORS[method], digits)

    @classmethod
    def check(cls, digits: str, method: CheckDigitMethod) -> CodecResult[bool]:
        return capture(f"check_digit.check[{method.name}]", cls._CHECKERS[method], digits)
