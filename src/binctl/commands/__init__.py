"""Subcommand modules for binctl.

``register_commands()`` defers the command imports so ``binctl --help``
stays fast. ``examples_option()`` is the ``--examples`` flag every command
and the root group carry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def examples_option(examples: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *examples* and exits."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


def register_commands(cli: click.Group) -> None:
    """Register the ``encode`` and ``decode`` commands on the root group."""
    from binctl.commands.decode import decode
    from binctl.commands.encode import encode

    cli.add_command(encode)
    cli.add_command(decode)
