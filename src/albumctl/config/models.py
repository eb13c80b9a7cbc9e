"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, albumctl.toml only contains
overrides. An empty file (or no file) reproduces the catalog rules
exactly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from albumctl.domain.album import ARTIST_MAX_LENGTH, MIN_RELEASE_YEAR, TITLE_MAX_LENGTH


class LimitsConfig(BaseModel):
    """[limits] section."""

    model_config = {"frozen": True}

    title_max_length: int = Field(default=TITLE_MAX_LENGTH, ge=1)
    artist_max_length: int = Field(default=ARTIST_MAX_LENGTH, ge=1)
    min_release_year: int = MIN_RELEASE_YEAR

