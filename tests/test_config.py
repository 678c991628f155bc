"""Tests for environment driven settings."""

from unittest.mock import patch

import pytest

from catalog_filters.config import FilterSettings, get_settings, load_env_file


class TestFilterSettings:
    """Test settings loading."""

    def test_defaults(self):
        """Test defaults without environment variables."""
        assert get_settings() == FilterSettings(default_namespace="default", strict_user_list=False)

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_strict_user_list_truthy(self, monkeypatch, value):
        """Test truthy spellings enable strict mode."""
        monkeypatch.setenv("CATALOG_FILTERS_STRICT_USER_LIST", value)
        assert FilterSettings.from_env().strict_user_list is True

    def test_strict_user_list_falsy(self, monkeypatch):
        """Test other values leave strict mode off."""
        monkeypatch.setenv("CATALOG_FILTERS_STRICT_USER_LIST", "no")
        assert FilterSettings.from_env().strict_user_list is False

    def test_default_namespace(self, monkeypatch):
        """Test the namespace override, ignoring blank values."""
        monkeypatch.setenv("CATALOG_FILTERS_DEFAULT_NAMESPACE", "acme")
        assert FilterSettings.from_env().default_namespace == "acme"

        monkeypatch.setenv("CATALOG_FILTERS_DEFAULT_NAMESPACE", "  ")
        assert FilterSettings.from_env().default_namespace == "default"

    def test_env_file_loaded_once_on_demand(self):
        """Test the .env file is read on first use rather than at import."""
        load_env_file.cache_clear()
        try:
            with patch("catalog_filters.config.load_dotenv", return_value=True) as mock_load:
                FilterSettings.from_env()
                get_settings()

            mock_load.assert_called_once_with()
        finally:
            load_env_file.cache_clear()
