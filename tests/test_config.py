"""
Tests for service configuration.
"""

import dataclasses

import pytest

from gh_api_cli.config import DEFAULT_BASE_URL, ServiceConfig
from gh_api_cli.utils.errors import ConfigurationError


class TestServiceConfig:
    """Test ServiceConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = ServiceConfig(token="abc")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.user_agent == "GitHub-API-Client"
        assert config.cache_enabled is False
        assert config.rate_limit_threshold == 100
        assert config.fail_on_rate_limit is False

    def test_immutable(self):
        """Test that settings cannot change after construction."""
        config = ServiceConfig(token="abc")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.token = "other"

    @pytest.mark.parametrize("token", ["", "   ", None])
    def test_empty_token_rejected(self, token):
        """Test that a blank token fails fast."""
        with pytest.raises(ConfigurationError, match="GITHUB_TOKEN"):
            ServiceConfig(token=token)

    def test_negative_ttl_rejected(self):
        """Test that a negative TTL is invalid."""
        with pytest.raises(ConfigurationError, match="cache_ttl_seconds"):
            ServiceConfig(token="abc", cache_ttl_seconds=-1)

    def test_negative_threshold_rejected(self):
        """Test that a negative threshold is invalid."""
        with pytest.raises(ConfigurationError, match="rate_limit_threshold"):
            ServiceConfig(token="abc", rate_limit_threshold=-5)


class TestFromEnv:
    """Test ServiceConfig.from_env."""

    def test_reads_token(self, monkeypatch):
        """Test that GITHUB_TOKEN is used."""
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        monkeypatch.delenv("GITHUB_API_URL", raising=False)

        config = ServiceConfig.from_env()

        assert config.token == "from-env"
        assert config.base_url == DEFAULT_BASE_URL

    def test_missing_token(self, monkeypatch):
        """Test that a missing token fails before any network access."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        with pytest.raises(ConfigurationError, match="GitHub token required"):
            ServiceConfig.from_env()

    def test_empty_token(self, monkeypatch):
        """Test that an empty variable counts as missing."""
        monkeypatch.setenv("GITHUB_TOKEN", "")

        with pytest.raises(ConfigurationError):
            ServiceConfig.from_env()

    def test_override_token(self, monkeypatch):
        """Test that an explicit token wins over the environment."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        config = ServiceConfig.from_env(token="explicit", cache_enabled=True)

        assert config.token == "explicit"
        assert config.cache_enabled is True

    def test_base_url_from_env(self, monkeypatch):
        """Test that GITHUB_API_URL overrides the API root."""
        monkeypatch.setenv("GITHUB_TOKEN", "t")
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")

        assert ServiceConfig.from_env().base_url == "https://ghe.example.com/api/v3"
