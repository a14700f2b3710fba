"""Error taxonomy for game metadata lookups."""


class GameLookupError(Exception):
    """Base class for lookup errors."""

    pass


class InvalidInputError(GameLookupError, ValueError):
    """Raised when the game name is empty or whitespace only."""

    pass


class LookupFailedError(GameLookupError):
    """
    Raised when a Wikipedia request fails.

    Covers network errors, timeouts, non-200 responses and response bodies
    that cannot be parsed.

    Attributes:
        stage: Which step failed ("search" or "summary")
        cause: The underlying exception, if any
    """

    def __init__(self, stage: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.cause = cause
