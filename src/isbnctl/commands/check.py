"""Command: validate a single ISBN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl check 9781593273880
  isbnctl check "0-12-345672-X"
  isbnctl -q check 012345672X""",
)
@click.argument("isbn")
@click.pass_obj
def check(app: AppContext, isbn: str) -> None:
    """Check that ISBN is a valid ISBN10 or ISBN13 (exit 1 if not)."""
    app.emit(app.service.check(isbn))
