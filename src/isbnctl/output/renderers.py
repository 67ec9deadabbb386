"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from isbnctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from isbnctl.services.result import ServiceResult

# Data key holding the single answer of an op, printed alone in quiet mode.
_QUIET_KEYS: dict[str, str] = {
    "check": "isbn13",
    "convert": "value",
    "show": "isbn13",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_ok(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key and result.data.get(key) is not None:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="isbn.key")
    if value is None:
        v = Text("n/a", style="isbn.missing")
    else:
        v = Text(str(value), style="isbn.value")
    console.print(k + v)


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="isbn.ok"), Text(f"  {result.op}", style="isbn.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="isbn.meta"))
        for key, value in result.meta.items():
            console.print(Text(f"    {key}: {value}", style="isbn.meta"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="isbn.error")
    op = Text(f"  {result.op}", style="isbn.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))
    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)
