"""Command: text to binary digits."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from binctl.commands import examples_option

if TYPE_CHECKING:
    from binctl.commands._context import AppContext


@click.command()
@examples_option(
    """\
  echo hello | binctl encode
  binctl encode notes.txt
  printf 'ab' | binctl --no-newline encode
  binctl --json encode notes.txt"""
)
@click.argument("input_file", type=click.File("rb"), default="-", metavar="[INPUT]")
@click.pass_obj
def encode(app: AppContext, input_file: BinaryIO) -> None:
    """Encode UTF-8 text as a string of 0/1 digits (8 per byte)."""
    app.emit(app.codec().encode(app.read_input(input_file)))
