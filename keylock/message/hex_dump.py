"""
Hex Dump Formatting and Message Parsing

Renders byte buffers in the canonical 16-bytes-per-line layout:

    0000:  41 42 43 44 45 46 47 48  49 4A 4B 4C 4D 4E 4F 50  ABCDEFGHIJKLMNOP

The offset is 4 hex digits and a colon, the hex columns are two groups of 8,
and printable ASCII (32-126) is shown on the right with '.' for the rest.
"""

from enum import Enum
from typing import List

from ..encoding.hex_codec import hex_decode
from ..errors import CodecResult, EmptyInputError, capture


HEX_DUMP_BYTES_PER_LINE = 16
HEX_DUMP_GROUP_SIZE = 8
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126


class ParseMode(Enum):
    """Message family being inspected. All modes render the same dump for now."""
    ATM_NDC = "ATM NDC"
    ATM_WINCOR = "ATM Wincor"
    ISO_8583_1987 = "ISO 8583 1987"

    @property
    def display_name(self) -> str:
        return self.value


def _hex_column(chunk: bytes, start: int) -> str:
    cells = []
    for i in range(start, start + HEX_DUMP_GROUP_SIZE):
        cells.append(f"{chunk[i]:02X} " if i < len(chunk) else "   ")
    return ''.join(cells)


def _ascii_column(chunk: bytes) -> str:
    return ''.join(chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else '.' for b in chunk)


def format_hex_dump(data: bytes) -> str:
    """
    Format bytes as a hex dump, one line per 16 bytes.

    A short last line keeps the hex columns aligned with blanks but only
    shows the bytes actually present in the ASCII column.

    Args:
        data: Bytes to render

    Returns:
        Lines joined by newlines (empty string for empty input)
    """
    lines: List[str] = []
    for offset in range(0, len(data), HEX_DUMP_BYTES_PER_LINE):
        chunk = data[offset:offset + HEX_DUMP_BYTES_PER_LINE]
        lines.append(
            f"{offset:04X}:  "
            f"{_hex_column(chunk, 0)} "
            f"{_hex_column(chunk, HEX_DUMP_GROUP_SIZE)} "
            f"{_ascii_column(chunk)}"
        )
    return '\n'.join(lines)


def parse_message(hex_data: str, mode: ParseMode) -> str:
    """
    Validate a hex message and render it as a hex dump.

    Raises:
        EmptyInputError: If the input is blank
        FormatError: If the hex is malformed
    """
    if not hex_data.strip():
        raise EmptyInputError("Input data cannot be empty")
    return format_hex_dump(hex_decode(hex_data))


class MessageParserEngine:

    @staticmethod
    def parse(hex_data: str, mode: ParseMode = ParseMode.ISO_8583_1987) -> CodecResult[str]:
        return capture(f"message.parse[{mode.name}]", parse_message, hex_data, mode)
