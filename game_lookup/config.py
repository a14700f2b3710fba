"""Configuration for the Wikipedia-backed game metadata lookups."""

import os
from dataclasses import dataclass

# Wikipedia endpoints
DEFAULT_SEARCH_URL = "https://en.wikipedia.org/w/api.php"
DEFAULT_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary"
DEFAULT_USER_AGENT = "GameInfoBot/1.0 (https://github.com/gameinfo-bot)"

# Network behavior
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_SEARCH_LIMIT = 5

# Appended to the user's game name to bias search results toward games
SEARCH_SUFFIX = "video game"

# =============================================================================
# Extraction Configuration
# =============================================================================

GENRE_KEYWORDS = (
    "action",
    "adventure",
    "role-playing",
    "rpg",
    "shooter",
    "puzzle",
    "strategy",
    "simulation",
    "sports",
    "racing",
    "platform",
    "horror",
    "survival",
    "sandbox",
    "fighting",
    "stealth",
    "visual novel",
    "mmo",
    "fps",
    "tps",
    "metroidvania",
)

STORY_SENTENCE_COUNT = 2
STORY_SENTENCE_DELIMITER = ". "

EXCERPT_LENGTH = 200

DEVELOPER_PATTERN = r"developed (?:and published )?by ([^.,;]+)"
UNKNOWN_DEVELOPER = "Unknown"


@dataclass(frozen=True)
class ResolverConfig:
    """Endpoints and network settings used by the game metadata resolver."""

    search_url: str = DEFAULT_SEARCH_URL
    summary_url: str = DEFAULT_SUMMARY_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    search_limit: int = DEFAULT_SEARCH_LIMIT

    @property
    def headers(self) -> dict[str, str]:
        """HTTP headers sent with every Wikipedia request."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {raw!r}")
    return value


def load_resolver_config() -> ResolverConfig:
    """
    Build the resolver configuration from environment variables.

    Every variable is optional; unset or empty values fall back to the
    module defaults.

    Returns:
        ResolverConfig populated from the environment

    Raises:
        ValueError: If a numeric variable cannot be parsed or is out of range
    """
    return ResolverConfig(
        search_url=os.getenv("WIKIPEDIA_SEARCH_URL") or DEFAULT_SEARCH_URL,
        summary_url=(os.getenv("WIKIPEDIA_SUMMARY_URL") or DEFAULT_SUMMARY_URL).rstrip("/"),
        user_agent=os.getenv("WIKIPEDIA_USER_AGENT") or DEFAULT_USER_AGENT,
        timeout_seconds=_read_float("WIKIPEDIA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        search_limit=_read_int("WIKIPEDIA_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT),
    )
