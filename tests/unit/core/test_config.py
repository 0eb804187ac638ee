"""Unit tests for core configuration.

Pattern: Pydantic Settings testing
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from supra.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_default_values(self) -> None:
        """Test that Settings has sensible defaults.

        Environment variables may override defaults, so check the Field
        defaults on the model rather than an instance.
        """
        fields = Settings.model_fields
        assert fields["service_name"].default == "supra"
        assert fields["log_level"].default == "WARNING"
        assert fields["environment"].default == "development"
        assert fields["case_lookback_footnotes"].default == 5
        assert fields["smallcaps_style"].default == "True Small Caps"
        assert fields["footnote_offset"].default == 0
        assert fields["smallcaps"].default is False

    def test_settings_from_environment(self) -> None:
        """Test that Settings loads from environment variables."""
        env_vars = {
            "SUPRA_LOG_LEVEL": "DEBUG",
            "SUPRA_CASE_LOOKBACK_FOOTNOTES": "3",
            "SUPRA_SMALLCAPS": "true",
            "SUPRA_FOOTNOTE_OFFSET": "12",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.log_level == "DEBUG"
            assert settings.case_lookback_footnotes == 3
            assert settings.smallcaps is True
            assert settings.footnote_offset == 12

    def test_settings_env_prefix(self) -> None:
        """Test that Settings only reads SUPRA_-prefixed variables."""
        env_vars = {
            "CASE_LOOKBACK_FOOTNOTES": "9",
            "SUPRA_CASE_LOOKBACK_FOOTNOTES": "2",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.case_lookback_footnotes == 2

    def test_negative_lookback_rejected(self) -> None:
        """Test that a negative case lookback window is invalid."""
        with pytest.raises(ValidationError):
            Settings(case_lookback_footnotes=-1)

    def test_negative_offset_rejected(self) -> None:
        """Test that a negative footnote offset is invalid."""
        with pytest.raises(ValidationError):
            Settings(footnote_offset=-1)


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_settings(self) -> None:
        """Test that get_settings returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()
