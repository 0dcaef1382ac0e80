"""Input/output plumbing around the codec.

The codec never reads incrementally: :func:`read_source` buffers the whole
input, optionally trims one trailing line terminator, and hands back an
in-memory stream the message types can ``read`` from.
"""

from __future__ import annotations

from io import BytesIO
from typing import BinaryIO

LINE_TERMINATORS: tuple[bytes, ...] = (b"\r\n", b"\n", b"\r")


def trim_line_terminator(raw: bytes) -> bytes:
    """Strip exactly one trailing ``\\r\\n``, ``\\n`` or ``\\r`` from *raw*."""
    for terminator in LINE_TERMINATORS:
        if raw.endswith(terminator):
            return raw[: -len(terminator)]
    return raw


def read_source(stream: BinaryIO, *, trim: bool = True) -> BytesIO:
    """Read *stream* to completion and return it as a fresh buffer."""
    raw = stream.read()
    if trim:
        raw = trim_line_terminator(raw)
    return BytesIO(raw)


def write_sink(stream: BinaryIO, payload: bytes, *, newline: bool = True) -> None:
    """Write *payload* once, followed by a single newline when requested."""
    stream.write(payload)
    if newline:
        stream.write(b"\n")
    stream.flush()
