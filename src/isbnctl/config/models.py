"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, isbnctl.toml only contains overrides.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel


class Form(StrEnum):
    """Renderings an ISBN can be converted to."""

    ISBN10 = "isbn10"
    ISBN13 = "isbn13"
    HYPHEN = "hyphen"
    URN = "urn"
    DOI = "doi"


class RangesConfig(BaseModel):
    """[ranges] section."""

    model_config = {"frozen": True}

    # Alternative range table; the packaged snapshot is used when unset.
    path: Path | None = None


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = {"frozen": True}

    default_form: Form = Form.ISBN13
