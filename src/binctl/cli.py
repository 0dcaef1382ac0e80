"""Root CLI group for binctl with global flags and command registration."""

from __future__ import annotations

import click

from binctl import __version__
from binctl.commands import examples_option, register_commands
from binctl.commands._context import AppContext
from binctl.config.settings import BinSettings


@click.group(invoke_without_command=True)
@examples_option(
    """\
  echo hi | binctl
  echo 0110100001101001 | binctl -d
  binctl --no-trim < message.txt
  binctl decode message.bin.txt"""
)
@click.version_option(version=__version__, prog_name="binctl")
@click.option("-d", "--decode", "decode_flag", is_flag=True, help="Decode from digits to text.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal error output.")
@click.option("-v", "--verbose", is_flag=True, help="Show size counters and pipeline stages.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-trim", is_flag=True, help="Keep a trailing newline on the input.")
@click.option("--no-newline", is_flag=True, help="Do not append a newline to the output.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    decode_flag: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_trim: bool,
    no_newline: bool,
    config_path: str | None,
) -> None:
    """binctl — text <-> binary digit converter.

    With no command, reads stdin and encodes it (or decodes it with -d).
    Every flag can also be switched on through its BINCTL_* variable,
    e.g. BINCTL_DECODE=1 or BINCTL_NO_NEWLINE=1.
    """
    settings = BinSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        decode=decode_flag,
        no_trim=no_trim,
        no_newline=no_newline,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from binctl.commands.decode import decode
        from binctl.commands.encode import encode

        ctx.invoke(decode if settings.decode else encode)


register_commands(cli)
