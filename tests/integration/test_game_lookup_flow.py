"""Integration tests for the game lookup flow, from tool call to display string."""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from fixtures.mocks import FakeWikipedia
from fixtures.responses import SEARCH_HADES, SUMMARY_HADES
from game_lookup import GAME_TOOLS, GameMetadataResolver, ResolverConfig


class TestGameLookupFlow:
    """End-to-end lookups against a fake Wikipedia."""

    @pytest.mark.asyncio
    async def test_all_three_views_for_hades(self, make_resolver, hades_wikipedia):
        resolver = make_resolver(hades_wikipedia)

        with patch("game_lookup.tools.get_resolver", return_value=resolver):
            genres, story, developer = [await tool("Hades") for tool in GAME_TOOLS]

        assert genres == "Hades (video game) belongs to genres: action, role-playing."
        assert story == (
            'Story summary of "Hades (video game)": Hades is a 2020 roguelike action '
            "role-playing game developed and published by Supergiant Games. It was released "
            "for macOS, Nintendo Switch, and Windows in September 2020."
        )
        assert developer.startswith('Developer of "Hades (video game)": Supergiant Games. Summary: Hades is')
        assert developer.endswith("...")
        assert len(hades_wikipedia.search_requests) == 3
        assert len(hades_wikipedia.summary_requests) == 3

    @pytest.mark.asyncio
    async def test_invalid_then_valid(self, make_resolver, hades_wikipedia):
        resolver = make_resolver(hades_wikipedia)

        assert await resolver.resolve("  ", "genres") == "Please provide the name of a video game."
        assert hades_wikipedia.requests == []

        assert "belongs to genres" in await resolver.resolve("Hades", "genres")

    @pytest.mark.asyncio
    async def test_not_found_flow(self, make_resolver, empty_wikipedia):
        resolver = make_resolver(empty_wikipedia)

        result = await resolver.resolve("Nonexistent Game", "story")

        assert result == 'No Wikipedia page found for "Nonexistent Game".'
        assert empty_wikipedia.summary_requests == []

    @pytest.mark.asyncio
    async def test_timeout_flow(self, resolver_config):
        """Test a slow endpoint is reported as a failure string."""
        fake = FakeWikipedia(search=SEARCH_HADES, summary_error=httpx.ReadTimeout("slow"))
        resolver = GameMetadataResolver(resolver_config, http_client=fake.client())

        result = await resolver.resolve("Hades", "story")

        assert result.startswith("Error summarizing game story:")
        assert "timed out" in result

    @pytest.mark.asyncio
    async def test_concurrent_lookups_are_independent(self, make_resolver, hades_wikipedia):
        resolver = make_resolver(hades_wikipedia)

        results = await asyncio.gather(
            resolver.resolve("Hades", "genres"),
            resolver.resolve("Hades", "developer"),
            resolver.resolve("", "story"),
        )

        assert results[0].startswith("Hades (video game) belongs to genres")
        assert results[1].startswith('Developer of "Hades (video game)"')
        assert results[2] == "Please provide the name of a video game."

    @pytest.mark.asyncio
    async def test_resolver_opens_its_own_client(self, monkeypatch):
        """Test a resolver without an injected client routes through a fresh one."""
        fake = FakeWikipedia(search=SEARCH_HADES, summary=SUMMARY_HADES)
        original = httpx.AsyncClient

        def patched_client(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(fake.handler)
            return original(*args, **kwargs)

        monkeypatch.setattr("game_lookup.wikipedia_client.httpx.AsyncClient", patched_client)
        resolver = GameMetadataResolver(ResolverConfig(user_agent="Flow/1.0"))

        result = await resolver.resolve("Hades", "developer")

        assert "Supergiant Games" in result
        assert fake.requests[0].headers["User-Agent"] == "Flow/1.0"
