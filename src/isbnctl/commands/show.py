"""Command: show every rendering of an ISBN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl show 9788478447749
  isbnctl --json show "978-0-393-33477-7"
  isbnctl -v show 9791032101056""",
)
@click.argument("isbn")
@click.pass_obj
def show(app: AppContext, isbn: str) -> None:
    """Show ISBN10, ISBN13, hyphenated, URN, and DOI forms of ISBN."""
    app.emit(app.service.show(isbn))
