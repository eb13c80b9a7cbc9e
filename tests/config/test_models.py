"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from albumctl.config.models import LimitsConfig


class TestLimitsConfig:
    def test_defaults_match_catalog_rules(self) -> None:
        limits = LimitsConfig()
        assert limits.title_max_length == 100
        assert limits.artist_max_length == 50
        assert limits.min_release_year == 1900

    def test_frozen(self) -> None:
        limits = LimitsConfig()
        with pytest.raises(ValidationError):
            limits.title_max_length = 10  # type: ignore[misc]

    def test_rejects_non_positive_caps(self) -> None:
        with pytest.raises(ValidationError):
            LimitsConfig(title_max_length=0)

