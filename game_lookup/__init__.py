"""
Video game metadata lookups backed by Wikipedia.

A lookup searches Wikipedia for "<name> video game", fetches the summary of
the first hit and derives one view from the summary text: genres, a short
story synopsis, or the developer.

Modules:
    config: Endpoints, vocabulary and ResolverConfig
    models: Lookup data model and LookupOutcome
    errors: InvalidInputError and LookupFailedError
    wikipedia_client: Async client for the search and summary endpoints
    extractors: Genre, story and developer extraction strategies
    formatting: Outcome to display string
    resolver: GameMetadataResolver orchestration
    tools: Agent tool functions

Usage:
    from game_lookup import GameMetadataResolver, MetadataView

    resolver = GameMetadataResolver()
    print(await resolver.resolve("Hades", MetadataView.GENRES))
"""

from .config import ResolverConfig, load_resolver_config
from .errors import GameLookupError, InvalidInputError, LookupFailedError
from .extractors import DeveloperExtractor, Extractor, GenreExtractor, StoryExtractor
from .formatting import format_outcome
from .models import (
    DeveloperInfo,
    GenreSet,
    LookupOutcome,
    LookupQuery,
    LookupStatus,
    MetadataView,
    SearchResult,
    StorySynopsis,
    SummaryDocument,
)
from .resolver import GameMetadataResolver
from .tools import GAME_TOOLS, get_developer_info, get_game_genres, summarize_game_story

__all__ = [
    "ResolverConfig",
    "load_resolver_config",
    "GameLookupError",
    "InvalidInputError",
    "LookupFailedError",
    "Extractor",
    "GenreExtractor",
    "StoryExtractor",
    "DeveloperExtractor",
    "format_outcome",
    "DeveloperInfo",
    "GenreSet",
    "LookupOutcome",
    "LookupQuery",
    "LookupStatus",
    "MetadataView",
    "SearchResult",
    "StorySynopsis",
    "SummaryDocument",
    "GameMetadataResolver",
    "GAME_TOOLS",
    "get_game_genres",
    "summarize_game_story",
    "get_developer_info",
]
