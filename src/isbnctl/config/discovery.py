"""Locate isbnctl.toml.

``ISBNCTL_CONFIG`` names the file outright and disables the search;
otherwise the nearest isbnctl.toml in the start directory or one of its
ancestors wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "isbnctl.toml"
CONFIG_ENV_VAR = "ISBNCTL_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
