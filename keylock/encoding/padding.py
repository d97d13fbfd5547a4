"""
Block Padding Helpers

Byte-level padding schemes applied before handing data to a block cipher
provider:
- PKCS#7: N bytes of value N
- ISO/IEC 7816-4: 0x80 then zeros
- Zero padding: zeros only, nothing added when already aligned
"""

from cryptography.hazmat.primitives.padding import PKCS7

from ..errors import FormatError


ISO7816_MARKER = 0x80


def _check_block_size(block_size: int) -> None:
    if not 1 <= block_size <= 255:
        raise FormatError(f"Block size must be 1-255, got {block_size}")


def pad_pkcs7(data: bytes, block_size: int) -> bytes:
    _check_block_size(block_size)
    padder = PKCS7(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def unpad_pkcs7(data: bytes, block_size: int) -> bytes:
    """
    Remove PKCS#7 padding.

    Args:
        data: Padded bytes, a whole number of blocks
        block_size: Block size in bytes (1-255)

    Raises:
        FormatError: If the trailing bytes are not valid PKCS#7 padding
    """
    _check_block_size(block_size)
    unpadder = PKCS7(block_size * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise FormatError("Invalid PKCS7 padding") from e


def pad_iso7816_4(data: bytes, block_size: int) -> bytes:
    _check_block_size(block_size)
    padding_length = block_size - (len(data) % block_size)
    return data + bytes([ISO7816_MARKER]) + b'\x00' * (padding_length - 1)


def unpad_iso7816_4(data: bytes) -> bytes:
    stripped = data.rstrip(b'\x00')
    if not stripped or stripped[-1] != ISO7816_MARKER:
        raise FormatError("Invalid ISO 7816-4 padding")
    return stripped[:-1]


def pad_zero(data: bytes, block_size: int) -> bytes:
    _check_block_size(block_size)
    remainder = len(data) % block_size
    if remainder == 0:
        return data
    return data + b'\x00' * (block_size - remainder)
