"""Command: render an ISBN in one form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand
from isbnctl.config.models import Form

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl convert 012345672X
  isbnctl convert 9781593273880 --to isbn10
  isbnctl convert 9781593273880 --to hyphen
  isbnctl -q convert 012345672X --to doi""",
)
@click.argument("isbn")
@click.option(
    "--to",
    "form",
    type=click.Choice([f.value for f in Form]),
    default=None,
    help="Target form (default from [convert] default_form).",
)
@click.pass_obj
def convert(app: AppContext, isbn: str, form: str | None) -> None:
    """Convert ISBN to another encoding or rendering."""
    target = Form(form) if form else app.settings.convert.default_form
    app.emit(app.service.convert(isbn, target))
