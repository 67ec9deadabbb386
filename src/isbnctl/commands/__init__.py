"""Subcommand modules for isbnctl.

Provides register_commands() which uses deferred imports to keep
``isbnctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from isbnctl.commands.check import check
    from isbnctl.commands.convert import convert
    from isbnctl.commands.show import show

    cli.add_command(check)
    cli.add_command(convert)
    cli.add_command(show)
