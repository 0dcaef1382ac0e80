"""Output mode dispatch for ServiceResult.

Three modes: JSON (``--json``), quiet (``-q``, plain one-line errors), and
the default, where success is the converted payload verbatim and failure
is a Rich-rendered error line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from binctl.output.renderers import render_error

if TYPE_CHECKING:
    from binctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from BinSettings."""

    model_config = ConfigDict(frozen=True)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True


def format_error_plain(result: ServiceResult) -> str:
    """One-line error without styling."""
    reason = "Unknown error" if result.error is None else (
        f"[{result.error.code}] {result.error.message}"
    )
    return f"ERROR: {result.op} — {reason}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    On success (non-JSON) this is exactly the converted output; the caller
    decides about a trailing newline.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return result.output
    if settings.quiet:
        return format_error_plain(result)
    return render_error(result, verbose=settings.verbose, no_color=not settings.color)
