"""Codec error hierarchy.

Every failure the codec can hit is a content error: deterministic,
not transient, and never recoverable mid-operation. The service layer
turns these into ``ServiceError`` payloads keyed by :attr:`CodecError.code`.
"""

from __future__ import annotations

from typing import Any


class CodecError(Exception):
    """Base class for all digit-string and text codec failures."""

    code: str = "CODEC_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured fields describing the offending value."""
        return {}


class InvalidDigitError(CodecError):
    """A character outside ``{'0', '1'}`` appeared in a digit string."""

    code = "INVALID_DIGIT"

    def __init__(self, digit: str, position: int | None = None) -> None:
        self.digit = digit
        self.position = position
        msg = f"Encountered non-binary digit {digit!r}"
        if position is not None:
            msg += f" at position {position}"
        super().__init__(msg)

    def detail(self) -> dict[str, Any]:
        return {"digit": self.digit, "position": self.position}


class InvalidLengthError(CodecError):
    """Digit-string length is not a multiple of the byte size."""

    code = "INVALID_LENGTH"

    def __init__(self, expected_multiple: int, actual: int) -> None:
        self.expected_multiple = expected_multiple
        self.actual = actual
        super().__init__(
            f"Number of binary digits must be a multiple of {expected_multiple}, got {actual}."
        )

    def detail(self) -> dict[str, Any]:
        return {"expected_multiple": self.expected_multiple, "actual": self.actual}


class DecodeError(CodecError):
    """A byte sequence is not valid UTF-8 where text is required."""

    code = "DECODE_ERROR"

    def __init__(self, position: int | None = None, reason: str = "invalid utf-8") -> None:
        self.position = position
        self.reason = reason
        msg = f"Input is not valid UTF-8 text: {reason}"
        if position is not None:
            msg += f" at byte {position}"
        super().__init__(msg)

    @classmethod
    def from_unicode_error(cls, exc: UnicodeDecodeError) -> DecodeError:
        """Build from the stdlib codec error, keeping the first bad offset."""
        return cls(position=exc.start, reason=exc.reason)

    def detail(self) -> dict[str, Any]:
        return {"position": self.position, "reason": self.reason}
