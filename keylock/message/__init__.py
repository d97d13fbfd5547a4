# Message Module
"""
Hex dump rendering for host messages (ATM NDC, ATM Wincor, ISO 8583).
"""

from .hex_dump import (
    ParseMode,
    MessageParserEngine,
    format_hex_dump,
    parse_message,
)

__all__ = [
    'ParseMode',
    'MessageParserEngine',
    'format_hex_dump',
    'parse_message',
]
