"""In-memory Rich consoles for the human-readable output mode.

Renderers draw onto a Console that records into a StringIO buffer and hand
back the captured text, so ``format_result()`` stays ``ServiceResult -> str``.
Rich drops colour by itself when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

# URN and DOI lines fit without wrapping.
DEFAULT_WIDTH = 120

ISBN_THEME = Theme(
    {
        # status line
        "isbn.ok": "bold green",
        "isbn.error": "bold red",
        "isbn.op": "bold cyan",
        # key/value block
        "isbn.key": "dim",
        "isbn.value": "bold",
        "isbn.missing": "dim italic",
        "isbn.meta": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed Console writing into a fresh StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ISBN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Return everything printed so far to a console from :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("get_output() needs a console made by create_console()")
    return buffer.getvalue()
