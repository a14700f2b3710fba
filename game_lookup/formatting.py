"""Render lookup outcomes as the plain strings shown to users and the model."""

from .models import (
    DeveloperInfo,
    GenreSet,
    LookupOutcome,
    LookupStatus,
    MetadataView,
    StorySynopsis,
)

INVALID_INPUT_MESSAGE = "Please provide the name of a video game."

_FAILURE_PREFIXES = {
    MetadataView.GENRES: "Error fetching game genres",
    MetadataView.STORY: "Error summarizing game story",
    MetadataView.DEVELOPER: "Error fetching developer info",
}


def format_genres(genre_set: GenreSet) -> str:
    if not genre_set.determined:
        return (
            f'Couldn\'t determine genres for "{genre_set.title}". '
            f"Summary: {genre_set.excerpt}..."
        )
    return f"{genre_set.title} belongs to genres: {', '.join(genre_set.genres)}."


def format_story(synopsis: StorySynopsis) -> str:
    if not synopsis.determined:
        return f'Could not find a story summary for "{synopsis.title}".'
    return f'Story summary of "{synopsis.title}": {synopsis.text}'


def format_developer(info: DeveloperInfo) -> str:
    # Without any summary text there is nothing to show as context
    if not info.excerpt:
        return f'Could not find developer info for "{info.title}".'
    return f'Developer of "{info.title}": {info.developer_name}. Summary: {info.excerpt}...'


def format_failure(view: MetadataView, error: Exception | None) -> str:
    return f"{_FAILURE_PREFIXES[view]}: {error}"


def format_outcome(outcome: LookupOutcome) -> str:
    """
    Convert a LookupOutcome into its user-facing string.

    Every status maps to a message; nothing here raises.
    """
    if outcome.status is LookupStatus.INVALID_INPUT:
        return INVALID_INPUT_MESSAGE

    if outcome.status is LookupStatus.NOT_FOUND:
        return f'No Wikipedia page found for "{outcome.game_name}".'

    if outcome.status is LookupStatus.LOOKUP_FAILED:
        return format_failure(outcome.view, outcome.error)

    result = outcome.result
    if isinstance(result, GenreSet):
        return format_genres(result)
    if isinstance(result, StorySynopsis):
        return format_story(result)
    if isinstance(result, DeveloperInfo):
        return format_developer(result)

    return format_failure(outcome.view, outcome.error or "no result")
