"""ISBN range table — the default :class:`RangeSegmenter`.

Mirrors the International ISBN Agency range message in two levels:
- ``prefixes``: per EAN prefix, rules giving the registration group length.
- ``groups``: per registration group (``"978-0"``), rules giving the
  registrant length.

Each rule covers a 7-digit window read right after the previous field
(right-padded with zeros when fewer than 7 body digits remain). A length of
0 marks a range that is not in use.

The table ships as TOML inside the package and can be replaced by pointing
:func:`load_range_table` at another file.
"""

from __future__ import annotations

import functools
import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from isbnctl.domain.segments import UNREGISTERED, Segments

logger = logging.getLogger(__name__)

WINDOW = 7
BODY_LENGTH = 9
DEFAULT_TABLE = "data/ranges.toml"


class RangeRule(BaseModel):
    """One ``start-end`` window mapped to a field length."""

    model_config = {"frozen": True}

    start: int
    end: int
    length: int = Field(ge=0, le=WINDOW)

    @model_validator(mode="before")
    @classmethod
    def _split_range(cls, data: Any) -> Any:
        """Accept the range message spelling ``{range = "0000000-1999999", length = 2}``."""
        if not isinstance(data, dict) or "range" not in data:
            return data
        data = dict(data)
        start, sep, end = str(data.pop("range")).partition("-")
        bounds = (start, end)
        if not sep or any(len(b) != WINDOW or not b.isdigit() for b in bounds):
            msg = f"range must be two {WINDOW}-digit bounds joined by '-'"
            raise ValueError(msg)
        data["start"], data["end"] = int(start), int(end)
        return data

    @model_validator(mode="after")
    def _ordered(self) -> RangeRule:
        if self.start > self.end:
            msg = f"range start {self.start} is after end {self.end}"
            raise ValueError(msg)
        return self

    def contains(self, window: int) -> bool:
        return self.start <= window <= self.end


def _match(rules: list[RangeRule], digits: str) -> int:
    """Return the length of the rule covering the first 7 of *digits*, else 0."""
    window = int(digits.ljust(WINDOW, "0")[:WINDOW])
    for rule in rules:
        if rule.contains(window):
            return rule.length
    return 0


class AgencyRanges(BaseModel):
    """Field lengths for one EAN prefix or registration group."""

    model_config = {"frozen": True}

    agency: str = ""
    rules: list[RangeRule] = Field(default_factory=list)


class RangeTable(BaseModel):
    """Immutable range table implementing :class:`RangeSegmenter`."""

    model_config = {"frozen": True}

    source: str = ""
    serial: str = ""
    date: str = ""
    prefixes: dict[str, AgencyRanges] = Field(default_factory=dict)
    groups: dict[str, AgencyRanges] = Field(default_factory=dict)

    @field_validator("groups")
    @classmethod
    def _group_keys(cls, groups: dict[str, AgencyRanges]) -> dict[str, AgencyRanges]:
        for key in groups:
            prefix, sep, group = key.partition("-")
            if not sep or len(prefix) != 3 or not group.isdigit():
                msg = f"group key must look like '978-0': {key!r}"
                raise ValueError(msg)
        return groups

    def segments(self, canonical13: str) -> Segments:
        """Split *canonical13* into group, registrant, and publication lengths."""
        located = self._locate(canonical13)
        if located is None:
            return UNREGISTERED
        grp, group = located
        reg = _match(group.rules, canonical13[3 + grp : 12])
        if reg == 0 or grp + reg > BODY_LENGTH:
            return UNREGISTERED
        return Segments(grp, reg, BODY_LENGTH - grp - reg)

    def agency(self, canonical13: str) -> str | None:
        """Return the registration group agency name, if the group is known."""
        located = self._locate(canonical13)
        if located is None:
            return None
        return located[1].agency or None

    def _locate(self, canonical13: str) -> tuple[int, AgencyRanges] | None:
        prefix = self.prefixes.get(canonical13[:3])
        if prefix is None:
            return None
        grp = _match(prefix.rules, canonical13[3:12])
        if grp == 0:
            return None
        group = self.groups.get(f"{canonical13[:3]}-{canonical13[3 : 3 + grp]}")
        if group is None:
            return None
        return grp, group


def load_range_table(path: Path | None = None) -> RangeTable:
    """Load a range table from TOML.

    Reads *path* when given, else the table packaged with isbnctl.

    Raises:
        tomllib.TOMLDecodeError: the file is not valid TOML.
        pydantic.ValidationError: the data does not describe a range table.
    """
    if path is None:
        raw = resources.files("isbnctl").joinpath(DEFAULT_TABLE).read_text(encoding="utf-8")
    else:
        raw = path.read_text(encoding="utf-8")
    table = RangeTable.model_validate(tomllib.loads(raw))
    logger.debug(
        "Loaded range table %s (serial=%s, groups=%d)",
        path or DEFAULT_TABLE,
        table.serial,
        len(table.groups),
    )
    return table


@functools.lru_cache(maxsize=1)
def default_range_table() -> RangeTable:
    """The packaged range table, loaded once."""
    return load_range_table()
