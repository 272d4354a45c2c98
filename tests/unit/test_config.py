"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from bookshelf.config import Settings
from bookshelf.core.exceptions import ValidationError as ConfigValidationError
from bookshelf.core.logging import configure_logging


class TestRecommendationSettings:
    """Test recommendation constants and validation."""

    def test_defaults(self, settings):
        assert settings.recommendation_min_limit == 12
        assert settings.recommendation_max_limit == 18
        assert settings.cold_start_threshold == 3
        assert settings.cold_start_popular_share == 0.7
        assert settings.top_genre_count == 3
        assert settings.popular_backfill_factor == 2
        assert settings.default_match_base == 65
        assert settings.fallback_match_base == 60

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_TOP_GENRE_COUNT", "2")
        monkeypatch.setenv("BOOKSHELF_ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.top_genre_count == 2
        assert settings.is_production is True

    def test_inverted_limit_range_rejected(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            Settings(_env_file=None, recommendation_min_limit=20, recommendation_max_limit=10)

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.details == {
            "recommendation_min_limit": 20,
            "recommendation_max_limit": 10,
        }

    def test_popular_share_must_be_fraction(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cold_start_popular_share=1.5)


class TestLogging:
    """Test structured logging setup."""

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_configure_logging(self, environment):
        configure_logging(Settings(_env_file=None, environment=environment))
