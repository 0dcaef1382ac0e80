"""Command: binary digits to text."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from binctl.commands import examples_option

if TYPE_CHECKING:
    from binctl.commands._context import AppContext


@click.command()
@examples_option(
    """\
  echo 0110100001101001 | binctl decode
  binctl decode message.bin.txt
  binctl -v decode message.bin.txt"""
)
@click.argument("input_file", type=click.File("rb"), default="-", metavar="[INPUT]")
@click.pass_obj
def decode(app: AppContext, input_file: BinaryIO) -> None:
    """Decode a string of 0/1 digits (8 per byte) back to UTF-8 text.

    Fails on any character other than 0 or 1, on a digit count that is not
    a multiple of 8, and on bytes that are not valid UTF-8.
    """
    app.emit(app.codec().decode(app.read_input(input_file)))
