"""Tests for environment-driven configuration."""

import pytest

from ghclient import ClientConfig, load_config
from ghclient.config import DEFAULT_OFFICIAL_URL, DEFAULT_TIMEOUT, DEFAULT_TRENDING_URL


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_when_unset(self):
        config = load_config({})
        assert config == ClientConfig()
        assert config.official_url == DEFAULT_OFFICIAL_URL
        assert config.trending_url == DEFAULT_TRENDING_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.debug is False

    def test_reads_overrides(self):
        config = load_config(
            {
                "GHCLIENT_OFFICIAL_URL": "http://ghe.local/api/v3",
                "GHCLIENT_TRENDING_URL": "http://trending.local/repo",
                "GHCLIENT_TIMEOUT": "2.5",
                "GHCLIENT_DEBUG": "TRUE",
            }
        )
        assert config.official_url == "http://ghe.local/api/v3"
        assert config.trending_url == "http://trending.local/repo"
        assert config.timeout == 2.5
        assert config.debug is True

    def test_empty_values_fall_back(self):
        config = load_config({"GHCLIENT_OFFICIAL_URL": "", "GHCLIENT_TIMEOUT": "  "})
        assert config.official_url == DEFAULT_OFFICIAL_URL
        assert config.timeout == DEFAULT_TIMEOUT

    @pytest.mark.parametrize("raw", ["soon", "0", "-1", "nan", "inf"])
    def test_invalid_timeout_raises(self, raw):
        with pytest.raises(ValueError, match="GHCLIENT_TIMEOUT"):
            load_config({"GHCLIENT_TIMEOUT": raw})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GHCLIENT_TRENDING_URL", "http://env.local/repo")
        monkeypatch.delenv("GHCLIENT_TIMEOUT", raising=False)
        assert load_config().trending_url == "http://env.local/repo"
