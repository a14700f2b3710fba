"""Wikipedia game lookup tools for the chat agent."""

import logging

from .formatting import format_failure
from .models import MetadataView
from .resolver import GameMetadataResolver

logger = logging.getLogger(__name__)

# Created on first use so environment overrides from .env are picked up
_resolver: GameMetadataResolver | None = None


def get_resolver() -> GameMetadataResolver:
    """Get or create the shared resolver."""
    global _resolver
    if _resolver is None:
        _resolver = GameMetadataResolver()
    return _resolver


async def _resolve(name: str, view: MetadataView) -> str:
    try:
        resolver = get_resolver()
    except ValueError as e:
        logger.error("Invalid Wikipedia lookup configuration: %s", e)
        return format_failure(view, e)
    return await resolver.resolve(name, view)


async def get_game_genres(name: str) -> str:
    """Get the genres of a given video game using public Wikipedia data.

    Args:
        name: The name of the video game to find genres for

    Returns:
        A sentence listing the detected genres, or an explanation if none were found
    """
    logger.info("Fetching genres for game: %s", name)
    return await _resolve(name, MetadataView.GENRES)


async def summarize_game_story(name: str) -> str:
    """Summarize the story or plot of a video game using Wikipedia.

    Args:
        name: The name of the video game

    Returns:
        The first two sentences of the game's Wikipedia summary
    """
    logger.info("Fetching story summary for: %s", name)
    return await _resolve(name, MetadataView.STORY)


async def get_developer_info(name: str) -> str:
    """Get information about the developer or studio of a video game using Wikipedia.

    Args:
        name: The name of the video game

    Returns:
        The developer name (or "Unknown") with a short excerpt of the summary
    """
    logger.info("Fetching developer info for: %s", name)
    return await _resolve(name, MetadataView.DEVELOPER)


GAME_TOOLS = [get_game_genres, summarize_game_story, get_developer_info]
