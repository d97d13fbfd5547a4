"""
Codec Failure Types

Every codec in keylock either fully succeeds or fully fails. Pure functions
raise one of the exceptions below; the engine classes catch them at the
boundary and hand back a CodecResult instead, so callers can surface
`result.message` to the user verbatim.

Failure kinds:
- FormatError: malformed hex, Base94, BCD, Base64 or padding
- EmptyInput: a required field is blank
- UnsupportedEncoding: a selector value with no implementation yet
- InvalidDER: structural ASN.1 violation
- InsufficientDigits: Amex SE input shorter than 8 digits
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar('T')


# ============================================================================
# Exceptions
# ============================================================================

class CodecError(ValueError):
    """Base class for every failure raised by a keylock codec."""
    kind = "CodecError"


class FormatError(CodecError):
    """Input text does not match the expected representation."""
    kind = "FormatError"


class InvalidBase94CharacterError(FormatError):
    """A character outside the Base94 alphabet."""
    kind = "InvalidBase94Character"


class InvalidBCDNibbleError(FormatError):
    """A binary BCD nibble whose value is above 9."""
    kind = "InvalidBCDNibble"


class InvalidBCDDigitError(FormatError):
    """A hexadecimal BCD digit in the range A-F."""
    kind = "InvalidBCDDigit"


class EmptyInputError(CodecError):
    kind = "EmptyInput"


class UnsupportedEncodingError(CodecError):
    kind = "UnsupportedEncoding"


class InvalidDERError(CodecError):
    kind = "InvalidDER"


class InsufficientDigitsError(CodecError):
    kind = "InsufficientDigits"


# ============================================================================
# Result wrapper
# ============================================================================

@dataclass(frozen=True)
class CodecResult(Generic[T]):
    """
    Outcome of a single codec call.

    Exactly one of `value` / `error` is meaningful, selected by `success`.
    A failed result never carries partial output.
    """
    success: bool
    value: Optional[T] = None
    error: Optional[CodecError] = None

    @classmethod
    def ok(cls, value: T) -> 'CodecResult[T]':
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: CodecError) -> 'CodecResult[T]':
        return cls(success=False, error=error)

    @property
    def message(self) -> str:
        """Failure message for display, empty on success."""
        return str(self.error) if self.error is not None else ""

    @property
    def kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, re-raising the captured error on failure."""
        if not self.success:
            raise self.error
        return self.value

    def to_dict(self) -> dict:
        if self.success:
            return {'success': True, 'value': self.value}
        return {'success': False, 'kind': self.kind, 'message': self.message}


def capture(operation: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> CodecResult[T]:
    """
    Run a codec function and wrap its outcome.

    Only CodecError is converted into a failed result; anything else is a
    programming error and propagates.

    Args:
        operation: Short name used in the debug log line
        func: The raising codec function
        *args, **kwargs: Forwarded to func

    Returns:
        CodecResult holding either the return value or the error
    """
    try:
        return CodecResult.ok(func(*args, **kwargs))
    except CodecError as e:
        logger.debug("%s failed (%s): %s", operation, e.kind, e)
        return CodecResult.fail(e)
