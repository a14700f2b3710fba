"""Heuristic extraction strategies over a page summary.

Each strategy is stateless and total: any string, including the empty
string, produces a view. Matching is deliberately simple (substring
containment, one regular expression) and can be swapped out by passing a
different extractor to the resolver.
"""

import re
from typing import Protocol

from .config import (
    DEVELOPER_PATTERN,
    EXCERPT_LENGTH,
    GENRE_KEYWORDS,
    STORY_SENTENCE_COUNT,
    STORY_SENTENCE_DELIMITER,
    UNKNOWN_DEVELOPER,
)
from .models import DeveloperInfo, GenreSet, MetadataView, StorySynopsis, View


class Extractor(Protocol):
    """Anything that can derive a view from summary text."""

    def extract(self, text: str, title: str = "") -> View:
        ...


class GenreExtractor:
    """
    Detect genre keywords by case-insensitive substring containment.

    Substring matching means "platform" also matches "platformer" and
    "action" matches "transaction". Results follow vocabulary order, not the
    order the terms appear in the text.
    """

    def __init__(
        self,
        vocabulary: tuple[str, ...] = GENRE_KEYWORDS,
        excerpt_length: int = EXCERPT_LENGTH,
    ) -> None:
        self.vocabulary = tuple(term.lower() for term in vocabulary)
        self.excerpt_length = excerpt_length

    def extract(self, text: str, title: str = "") -> GenreSet:
        lower = text.lower()
        genres = tuple(term for term in self.vocabulary if term in lower)
        return GenreSet(title=title, genres=genres, excerpt=text[: self.excerpt_length])


class StoryExtractor:
    """
    Keep the first sentences of the summary.

    Splits on ". " and rejoins the kept segments with ". " plus a trailing
    period. Abbreviations and decimals split early; a kept segment that
    already ends in "." gets a second period.
    """

    def __init__(
        self,
        sentence_count: int = STORY_SENTENCE_COUNT,
        delimiter: str = STORY_SENTENCE_DELIMITER,
    ) -> None:
        self.sentence_count = sentence_count
        self.delimiter = delimiter

    def extract(self, text: str, title: str = "") -> StorySynopsis:
        if not text:
            return StorySynopsis(title=title, text="")

        segments = text.split(self.delimiter)[: self.sentence_count]
        return StorySynopsis(title=title, text=self.delimiter.join(segments) + ".")


class DeveloperExtractor:
    """Pull the studio name following "developed by" / "developed and published by"."""

    def __init__(
        self,
        pattern: str = DEVELOPER_PATTERN,
        excerpt_length: int = EXCERPT_LENGTH,
    ) -> None:
        self.pattern = re.compile(pattern, re.IGNORECASE)
        self.excerpt_length = excerpt_length

    def extract(self, text: str, title: str = "") -> DeveloperInfo:
        match = self.pattern.search(text)
        developer = match.group(1).strip() if match else ""
        return DeveloperInfo(
            title=title,
            developer_name=developer or UNKNOWN_DEVELOPER,
            excerpt=text[: self.excerpt_length],
        )


def default_extractors() -> dict[MetadataView, Extractor]:
    """Map each view to its stock extraction strategy."""
    return {
        MetadataView.GENRES: GenreExtractor(),
        MetadataView.STORY: StoryExtractor(),
        MetadataView.DEVELOPER: DeveloperExtractor(),
    }
