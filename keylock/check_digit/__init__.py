# Check Digit Module
"""
Check digit generation and verification:
- Luhn (MOD 10)
- Amex SE (MOD 9)
"""

from .check_digit import (
    CheckDigitMethod,
    CheckDigitEngine,
    generate_luhn,
    verify_luhn,
    generate_amex_se,
    check_amex_se,
    AMEX_SE_NO_CHECK_DIGIT,
)

__all__ = [
    'CheckDigitMethod',
    'CheckDigitEngine',
    'generate_luhn',
    'verify_luhn',
    'generate_amex_se',
    'check_amex_se',
    'AMEX_SE_NO_CHECK_DIGIT',
]
