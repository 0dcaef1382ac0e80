"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns input buffering (with newline trimming), the
codec service for the run, and result emission (stdout/stderr routing
plus exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO

import click

from binctl.config.logging import configure_logging
from binctl.infrastructure.streams import read_source, write_sink
from binctl.output.formatters import OutputSettings, format_result
from binctl.output.renderers import render_diagnostics

if TYPE_CHECKING:
    from io import BytesIO

    from binctl.config.settings import BinSettings
    from binctl.services.codec import CodecService
    from binctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BinSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
        )

    def codec(self) -> CodecService:
        """The codec service, reporting stage counters in verbose mode."""
        from binctl.services.codec import CodecService

        return CodecService(report_stages=self.settings.verbose)

    def read_input(self, stream: BinaryIO) -> BytesIO:
        """Buffer the whole input, trimming a trailing line terminator if configured."""
        return read_source(stream, trim=self.settings.trim_input)

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult out with the right exit status.

        * Success: the converted payload goes to stdout as bytes, once.
          Verbose diagnostics go to stderr so they never pollute piped output.
        * Failure: the error goes to stderr and the process exits with code 1.
        """
        settings = self.output_settings
        text = format_result(result, settings=settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        if settings.json_output:
            click.echo(text)
            return

        write_sink(sys.stdout.buffer, text.encode("utf-8"), newline=self.settings.trailing_newline)
        if settings.verbose and not settings.quiet:
            click.echo(render_diagnostics(result, no_color=not settings.color), err=True)
