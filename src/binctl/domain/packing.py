"""Bit-stream packer — whole digit strings and 8-bit groups."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from binctl.domain.bits import BYTE_SIZE, bit_to_char, char_to_bit


def digits_to_bits(chars: Iterable[str]) -> list[bool]:
    """Convert digit characters to bits, stopping at the first invalid one.

    Raises:
        InvalidDigitError: Carrying the offending character and its index.
    """
    return [char_to_bit(char, position) for position, char in enumerate(chars)]


def bits_to_digit_string(bits: Iterable[bool]) -> str:
    return "".join(bit_to_char(bit) for bit in bits)


def chunk_bits_into_bytes(bits: Sequence[bool]) -> list[tuple[bool, ...]]:
    """Partition *bits* into consecutive groups of :data:`BYTE_SIZE`.

    Callers must check divisibility first; a remainder is a programming
    error, not a content error.
    """
    if len(bits) % BYTE_SIZE != 0:
        msg = f"Bit count {len(bits)} is not a multiple of {BYTE_SIZE}"
        raise ValueError(msg)
    return [tuple(bits[i : i + BYTE_SIZE]) for i in range(0, len(bits), BYTE_SIZE)]
