"""
Unit tests for application settings.
"""
import pytest
from pydantic import ValidationError

from string_suggestion.config import Settings


class TestSettings:
    """Tests for Settings validation."""

    def test_default_weight(self):
        assert Settings(_env_file=None).SUGGESTION_DEFAULT_WEIGHT == 1

    def test_negative_default_weight_rejected(self):
        """Test a negative flat weight fails at startup instead of per request."""
        with pytest.raises(ValidationError):
            Settings(SUGGESTION_DEFAULT_WEIGHT=-1, _env_file=None)

    def test_cors_origins_list(self):
        settings = Settings(CORS_ORIGINS="http://a.test, http://b.test", _env_file=None)
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
