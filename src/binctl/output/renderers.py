"""Rich renderers for the parts of a ServiceResult that are not codec output.

Successful conversions print their payload verbatim, so only errors and
verbose diagnostics (size counters, stage table) are styled here. Each
render goes to its own in-memory console and comes back as a string;
Rich drops the colors when the destination is not a terminal.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from binctl.services.result import ServiceResult

STYLES = Theme(
    {
        "bin.ok": "bold green",
        "bin.error": "bold red",
        "bin.code": "bold magenta",
        "bin.op": "bold cyan",
        "bin.key": "dim",
        "bin.value": "bold",
    }
)


def render_error(result: ServiceResult, *, verbose: bool = False, no_color: bool = False) -> str:
    """Render a failed result: status line, then detail and stages when verbose."""
    buf, console = _console(no_color)
    err = result.error
    head = [Text("ERROR", style="bin.error"), Text(f"  {result.op}", style="bin.op"), Text(" — ")]
    if err is None:
        console.print(*head, "Unknown error", sep="")
        return _text(buf)

    console.print(*head, Text(f"[{err.code}] ", style="bin.code"), Text(err.message), sep="")
    if verbose:
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for key, value in err.detail.items():
                _field(console, key, value, indent=4)
        _stages(console, result)
    return _text(buf)


def render_diagnostics(result: ServiceResult, *, no_color: bool = False) -> str:
    """Render the verbose-mode summary of a successful conversion."""
    buf, console = _console(no_color)
    console.print(Text("OK", style="bin.ok"), Text(f"  {result.op}", style="bin.op"), sep="")
    for key, value in result.data.items():
        if key != "output":
            _field(console, key, value, indent=2)
    _stages(console, result)
    return _text(buf)


def _console(no_color: bool) -> tuple[StringIO, Console]:
    buf = StringIO()
    return buf, Console(file=buf, theme=STYLES, no_color=no_color, highlight=False, width=120)


def _text(buf: StringIO) -> str:
    return buf.getvalue().rstrip("\n")


def _field(console: Console, key: str, value: Any, *, indent: int) -> None:
    shown = repr(value) if isinstance(value, str) else str(value)
    console.print(
        Text(f"{' ' * indent}{key}: ", style="bin.key"), Text(shown, style="bin.value"), sep=""
    )


def _stages(console: Console, result: ServiceResult) -> None:
    """One line per pipeline stage: status, name, count with unit, time."""
    stages: list[dict[str, Any]] = (result.meta or {}).get("stages") or []
    if not stages:
        return
    console.print(Text("  stages:", style="dim"))
    for stage in stages:
        ok = stage.get("ok", True)
        console.print(
            Text.assemble(
                "    ",
                ("ok  " if ok else "FAIL", "bin.ok" if ok else "bin.error"),
                f"  {stage['name']:<14}",
                (f"{stage['count']:>8} {stage['unit']:<7}", "bin.value"),
                (f"{stage['elapsed_ms']:>10.3f}ms", "dim"),
            )
        )
