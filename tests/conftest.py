"""Shared pytest fixtures for the gameinfo-bot test suite."""

import pytest
import pytest_asyncio

from fixtures.mocks import FakeWikipedia, create_mock_interaction, create_recording_handler
from fixtures.responses import SEARCH_EMPTY, SEARCH_HADES, SUMMARY_HADES
from game_lookup import GameMetadataResolver, ResolverConfig
from scheduler import EXECUTE_TASK_CALLBACK, InMemoryTaskScheduler


# ============================================================================
# Wikipedia Fakes
# ============================================================================


@pytest.fixture
def resolver_config():
    """Resolver config with a short timeout and the real endpoint layout."""
    return ResolverConfig(timeout_seconds=1.0, user_agent="GameInfoBot-Tests/1.0")


@pytest.fixture
def hades_wikipedia():
    """Fake Wikipedia that knows about Hades."""
    return FakeWikipedia(search=SEARCH_HADES, summary=SUMMARY_HADES)


@pytest.fixture
def empty_wikipedia():
    """Fake Wikipedia whose search never matches."""
    return FakeWikipedia(search=SEARCH_EMPTY, summary=SUMMARY_HADES)


@pytest.fixture
def make_resolver(resolver_config):
    """Build a resolver backed by a FakeWikipedia."""

    def _make(fake: FakeWikipedia, **kwargs) -> GameMetadataResolver:
        return GameMetadataResolver(resolver_config, http_client=fake.client(), **kwargs)

    return _make


# ============================================================================
# Scheduler Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def scheduler():
    """In-memory scheduler with a recording execute_task handler."""
    sched = InMemoryTaskScheduler()
    handler, received = create_recording_handler()
    sched.register_handler(EXECUTE_TASK_CALLBACK, handler)
    sched.received = received
    yield sched
    await sched.shutdown()


# ============================================================================
# Discord Mocks
# ============================================================================


@pytest.fixture
def mock_interaction():
    """Mock Discord interaction for slash commands."""
    return create_mock_interaction()


@pytest.fixture
def mock_api_keys():
    """Mock API keys for the chat agent."""
    return {
        "OPENROUTER_API_KEY": "test-openrouter-api-key-12345",
    }
