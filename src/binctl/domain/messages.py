"""Message value objects — the two shapes data takes inside the codec.

``BinMsg`` holds raw bytes and speaks the digit-string wire form.
``StrMsg`` holds decoded text and speaks UTF-8. Both are frozen: they are
created by ``read`` and consumed by ``write`` or a conversion function
in :mod:`binctl.domain.conversion`.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from pydantic import BaseModel

from binctl.domain.bits import BYTE_SIZE, bits_to_byte, byte_to_bits
from binctl.domain.errors import DecodeError, InvalidLengthError
from binctl.domain.packing import bits_to_digit_string, chunk_bits_into_bytes, digits_to_bits

TEXT_ENCODING = "utf-8"

logger = logging.getLogger(__name__)


def decode_text(raw: bytes) -> str:
    """Decode *raw* as UTF-8, raising :class:`DecodeError` on failure."""
    try:
        return raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeError.from_unicode_error(exc) from exc


class BinMsg(BaseModel):
    """A byte sequence whose wire form is a string of ``0``/``1`` digits."""

    model_config = {"frozen": True}

    data: bytes = b""

    @classmethod
    def read(cls, source: BinaryIO) -> BinMsg:
        """Parse a digit string from *source*.

        The length check runs on the raw input before any digit is looked at.

        Raises:
            DecodeError: Input is not valid UTF-8.
            InvalidLengthError: Input length is not a multiple of 8.
            InvalidDigitError: Input contains a character other than 0/1.
        """
        raw = source.read()
        text = decode_text(raw)
        if len(raw) % BYTE_SIZE != 0:
            raise InvalidLengthError(BYTE_SIZE, len(raw))
        return cls._pack(text)

    @classmethod
    def from_digits(cls, digits: str) -> BinMsg:
        if len(digits) % BYTE_SIZE != 0:
            raise InvalidLengthError(BYTE_SIZE, len(digits))
        return cls._pack(digits)

    @classmethod
    def _pack(cls, digits: str) -> BinMsg:
        bits = digits_to_bits(digits)
        data = bytes(bits_to_byte(chunk) for chunk in chunk_bits_into_bytes(bits))
        logger.debug("Packed %d digits into %d bytes", len(digits), len(data))
        return cls(data=data)

    @property
    def digits(self) -> str:
        """The digit string :meth:`write` emits."""
        return bits_to_digit_string(bit for byte in self.data for bit in byte_to_bits(byte))

    @property
    def bit_count(self) -> int:
        return len(self.data) * BYTE_SIZE

    def write(self, sink: BinaryIO) -> None:
        """Write the digit string to *sink* with no trailing separator."""
        sink.write(self.digits.encode("ascii"))


class StrMsg(BaseModel):
    """Decoded text, backed by its UTF-8 encoding."""

    model_config = {"frozen": True}

    text: str = ""

    @classmethod
    def read(cls, source: BinaryIO) -> StrMsg:
        """Read all of *source* and decode it as UTF-8.

        Raises:
            DecodeError: Input is not valid UTF-8.
        """
        raw = source.read()
        text = decode_text(raw)
        logger.debug("Read %d bytes of text (%d chars)", len(raw), len(text))
        return cls(text=text)

    def to_bytes(self) -> bytes:
        return self.text.encode(TEXT_ENCODING)

    def write(self, sink: BinaryIO) -> None:
        """Write the UTF-8 text to *sink* verbatim."""
        sink.write(self.to_bytes())


Message = BinMsg | StrMsg
