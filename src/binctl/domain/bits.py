"""Bit codec — single bytes and single digit characters.

Bytes are unpacked MSB-first: index 0 of a bit tuple is the 128 place.
"""

from __future__ import annotations

from collections.abc import Sequence

from binctl.domain.errors import InvalidDigitError

BYTE_SIZE = 8

DIGIT_ONE = "1"
DIGIT_ZERO = "0"


def byte_to_bits(byte: int) -> tuple[bool, ...]:
    """Return the 8 bits of *byte*, most-significant bit first."""
    return tuple(bool((byte >> shift) & 1) for shift in range(BYTE_SIZE - 1, -1, -1))


def bits_to_byte(bits: Sequence[bool]) -> int:
    """Fold 8 MSB-first bits back into an integer in 0..255."""
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


def char_to_bit(char: str, position: int | None = None) -> bool:
    """Map ``'1'`` to True and ``'0'`` to False.

    Raises:
        InvalidDigitError: For any other character.
    """
    if char == DIGIT_ONE:
        return True
    if char == DIGIT_ZERO:
        return False
    raise InvalidDigitError(char, position)


def bit_to_char(bit: bool) -> str:
    return DIGIT_ONE if bit else DIGIT_ZERO
