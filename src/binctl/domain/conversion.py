"""Explicit conversions between message types.

``bin_from_str`` is total. ``str_from_bin`` can fail, and raises
:class:`~binctl.domain.errors.DecodeError` so every caller sees it.
"""

from __future__ import annotations

from binctl.domain.messages import BinMsg, StrMsg, decode_text


def bin_from_str(msg: StrMsg) -> BinMsg:
    """Wrap the text's UTF-8 bytes as a byte message."""
    return BinMsg(data=msg.to_bytes())


def str_from_bin(msg: BinMsg) -> StrMsg:
    """Decode a byte message as text.

    Raises:
        DecodeError: With the offset of the first invalid byte sequence.
    """
    return StrMsg(text=decode_text(msg.data))
