"""Data model for game metadata lookups.

Every value here is created and discarded within a single lookup.
"""

from dataclasses import dataclass
from enum import Enum

from .config import UNKNOWN_DEVELOPER
from .errors import InvalidInputError


class MetadataView(str, Enum):
    """The metadata views derivable from a page summary."""

    GENRES = "genres"
    STORY = "story"
    DEVELOPER = "developer"


class LookupStatus(str, Enum):
    """Terminal state of a lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNDETERMINED = "undetermined"
    INVALID_INPUT = "invalid_input"
    LOOKUP_FAILED = "lookup_failed"


@dataclass(frozen=True)
class LookupQuery:
    """A validated game name."""

    game_name: str

    @classmethod
    def parse(cls, game_name: str | None) -> "LookupQuery":
        """
        Validate a user-supplied game name.

        Raises:
            InvalidInputError: If the name is missing, empty or whitespace only
        """
        if not game_name or not game_name.strip():
            raise InvalidInputError("Game name cannot be empty")
        return cls(game_name=game_name.strip())


@dataclass(frozen=True)
class SearchResult:
    """Outcome of the search step. A None title means no page matched."""

    canonical_title: str | None

    @property
    def found(self) -> bool:
        return self.canonical_title is not None


@dataclass(frozen=True)
class SummaryDocument:
    """Short prose abstract of a Wikipedia page."""

    title: str
    extract_text: str = ""


@dataclass(frozen=True)
class GenreSet:
    """Genres detected in a summary, in vocabulary order."""

    title: str
    genres: tuple[str, ...]
    excerpt: str

    @property
    def determined(self) -> bool:
        return bool(self.genres)


@dataclass(frozen=True)
class StorySynopsis:
    """The first sentences of a summary."""

    title: str
    text: str

    @property
    def determined(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class DeveloperInfo:
    """Developer name pulled from a summary, plus supporting context."""

    title: str
    developer_name: str
    excerpt: str

    @property
    def determined(self) -> bool:
        return self.developer_name != UNKNOWN_DEVELOPER


View = GenreSet | StorySynopsis | DeveloperInfo


@dataclass(frozen=True)
class LookupOutcome:
    """
    Typed result of a lookup, converted to text only at the edge.

    Attributes:
        status: Terminal state of the lookup
        view: Which metadata view was requested
        game_name: The name as the user supplied it
        title: Canonical page title, when the search step found one
        result: Extracted view, for FOUND and UNDETERMINED outcomes
        error: The failure, for INVALID_INPUT and LOOKUP_FAILED outcomes
    """

    status: LookupStatus
    view: MetadataView
    game_name: str
    title: str | None = None
    result: View | None = None
    error: Exception | None = None
