"""Unit tests for game_lookup/config.py - Resolver configuration from the environment."""

import pytest

from game_lookup.config import (
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SEARCH_URL,
    DEFAULT_SUMMARY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ResolverConfig,
    load_resolver_config,
)

ENV_VARS = (
    "WIKIPEDIA_SEARCH_URL",
    "WIKIPEDIA_SUMMARY_URL",
    "WIKIPEDIA_USER_AGENT",
    "WIKIPEDIA_TIMEOUT_SECONDS",
    "WIKIPEDIA_SEARCH_LIMIT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadResolverConfig:
    """Tests for load_resolver_config."""

    def test_defaults(self):
        """Test unset variables fall back to the module defaults."""
        config = load_resolver_config()

        assert config.search_url == DEFAULT_SEARCH_URL
        assert config.summary_url == DEFAULT_SUMMARY_URL
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 5.0
        assert config.search_limit == DEFAULT_SEARCH_LIMIT

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("WIKIPEDIA_SEARCH_URL", "https://de.wikipedia.org/w/api.php")
        monkeypatch.setenv("WIKIPEDIA_SUMMARY_URL", "https://de.wikipedia.org/api/rest_v1/page/summary/")
        monkeypatch.setenv("WIKIPEDIA_USER_AGENT", "MyBot/2.0")
        monkeypatch.setenv("WIKIPEDIA_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("WIKIPEDIA_SEARCH_LIMIT", "3")

        config = load_resolver_config()

        assert config.search_url == "https://de.wikipedia.org/w/api.php"
        assert config.summary_url == "https://de.wikipedia.org/api/rest_v1/page/summary"
        assert config.user_agent == "MyBot/2.0"
        assert config.timeout_seconds == 2.5
        assert config.search_limit == 3

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("WIKIPEDIA_TIMEOUT_SECONDS", "")
        monkeypatch.setenv("WIKIPEDIA_USER_AGENT", "")

        config = load_resolver_config()

        assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        assert config.user_agent == DEFAULT_USER_AGENT

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_timeout(self, monkeypatch, value):
        monkeypatch.setenv("WIKIPEDIA_TIMEOUT_SECONDS", value)

        with pytest.raises(ValueError, match="WIKIPEDIA_TIMEOUT_SECONDS"):
            load_resolver_config()

    @pytest.mark.parametrize("value", ["many", "0", "2.5"])
    def test_invalid_search_limit(self, monkeypatch, value):
        monkeypatch.setenv("WIKIPEDIA_SEARCH_LIMIT", value)

        with pytest.raises(ValueError, match="WIKIPEDIA_SEARCH_LIMIT"):
            load_resolver_config()


class TestResolverConfig:
    """Tests for ResolverConfig."""

    def test_headers(self):
        config = ResolverConfig(user_agent="Agent/1.0")

        assert config.headers == {"User-Agent": "Agent/1.0", "Accept": "application/json"}

    def test_is_frozen(self):
        config = ResolverConfig()

        with pytest.raises(AttributeError):
            config.timeout_seconds = 10
