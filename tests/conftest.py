"""Shared pytest fixtures and test helpers for isbnctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from isbnctl.domain.segments import Segments

# (input, isbn10, isbn13, hyphen, urn, doi)
KNOWN_VECTORS: list[tuple[str, str, str, str, str, str]] = [
    (
        "012345672X",
        "012345672X",
        "9780123456724",
        "978-0-12-345672-4",
        "URN:ISBN:9780123456724",
        "10.978.012/3456724",
    ),
    (
        "9780387308869",
        "0387308865",
        "9780387308869",
        "978-0-387-30886-9",
        "URN:ISBN:9780387308869",
        "10.978.0387/308869",
    ),
    (
        "9780393334777",
        "0393334775",
        "9780393334777",
        "978-0-393-33477-7",
        "URN:ISBN:9780393334777",
        "10.978.0393/334777",
    ),
    (
        "9781593273880",
        "1593273886",
        "9781593273880",
        "978-1-59327-388-0",
        "URN:ISBN:9781593273880",
        "10.978.159327/3880",
    ),
    (
        "9788478447749",
        "8478447741",
        "9788478447749",
        "978-84-7844-774-9",
        "URN:ISBN:9788478447749",
        "10.978.847844/7749",
    ),
]

# Valid ISBN13 with the 979 prefix in a registered range (979-10, France).
ISBN_979 = "9791032101056"
# Valid ISBN13 outside every registered range.
ISBN_UNREGISTERED = "9799999999990"


class FixedSegmenter:
    """Range segmenter fake returning the same split for every identifier."""

    def __init__(self, split: tuple[int, int, int]) -> None:
        self.split = split
        self.calls: list[str] = []

    def segments(self, canonical13: str) -> Segments:
        self.calls.append(canonical13)
        return Segments(*self.split)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own ISBNCTL_* environment out of tests."""
    monkeypatch.delenv("ISBNCTL_CONFIG", raising=False)
    monkeypatch.delenv("ISBNCTL_CONVERT__DEFAULT_FORM", raising=False)
    monkeypatch.delenv("ISBNCTL_RANGES__PATH", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    isbn = logging.getLogger("isbnctl")
    isbn_level = isbn.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    isbn.setLevel(isbn_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no isbnctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def small_ranges_toml() -> str:
    """A minimal two-group range table in TOML form."""
    return """\
serial = "test-1"

[prefixes."978"]
rules = [
    { range = "0000000-5999999", length = 1 },
    { range = "6000000-9999999", length = 0 },
]

[groups."978-0"]
agency = "English language"
rules = [
    { range = "0000000-1999999", length = 2 },
    { range = "2000000-6999999", length = 3 },
    { range = "7000000-9999999", length = 0 },
]
"""
