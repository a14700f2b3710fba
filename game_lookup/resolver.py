"""GameMetadataResolver: search, fetch summary, extract a view."""

import logging

import httpx

from .config import SEARCH_SUFFIX, ResolverConfig, load_resolver_config
from .errors import InvalidInputError, LookupFailedError
from .extractors import Extractor, default_extractors
from .formatting import format_outcome
from .models import LookupOutcome, LookupQuery, LookupStatus, MetadataView
from .wikipedia_client import WikipediaClient

logger = logging.getLogger(__name__)


def build_search_query(game_name: str) -> str:
    """Append the disambiguating suffix to a game name."""
    return f"{game_name} {SEARCH_SUFFIX}"


class GameMetadataResolver:
    """
    Resolve a free-text game name into one metadata view.

    Each lookup is independent: search Wikipedia, take the first hit, fetch
    its summary, run the extractor for the requested view. There are no
    retries and nothing is cached between calls.

    Attributes:
        config: Endpoints and network settings
        extractors: Extraction strategy per view
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        extractors: dict[MetadataView, Extractor] | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            config: Resolver configuration (loaded from environment when omitted)
            http_client: Shared HTTP client; when omitted a client is opened per lookup
            extractors: Override strategies for some or all views
        """
        self.config = config or load_resolver_config()
        self._http_client = http_client
        self.extractors = default_extractors()
        if extractors:
            self.extractors.update(extractors)

    async def lookup(self, game_name: str | None, view: MetadataView | str) -> LookupOutcome:
        """
        Run a lookup and return a typed outcome.

        Args:
            game_name: Game name as typed by the user
            view: Which view to derive ("genres", "story" or "developer")

        Returns:
            LookupOutcome describing success, a negative result or a failure
        """
        view = MetadataView(view)
        raw_name = game_name or ""

        try:
            query = LookupQuery.parse(game_name)
        except InvalidInputError as e:
            return LookupOutcome(LookupStatus.INVALID_INPUT, view, raw_name, error=e)

        async with WikipediaClient(self.config, self._http_client) as wiki:
            try:
                search_result = await wiki.search(build_search_query(query.game_name))
                if not search_result.found:
                    return LookupOutcome(LookupStatus.NOT_FOUND, view, query.game_name)

                title = search_result.canonical_title
                document = await wiki.fetch_summary(title)
            except LookupFailedError as e:
                logger.warning(
                    "Wikipedia %s lookup failed for '%s': %s", e.stage, query.game_name, e
                )
                return LookupOutcome(LookupStatus.LOOKUP_FAILED, view, query.game_name, error=e)

        extracted = self.extractors[view].extract(document.extract_text, title=title)
        status = LookupStatus.FOUND if extracted.determined else LookupStatus.UNDETERMINED
        return LookupOutcome(status, view, query.game_name, title=title, result=extracted)

    async def resolve(self, game_name: str | None, view: MetadataView | str) -> str:
        """Run a lookup and format it for display. Never raises for lookup errors."""
        return format_outcome(await self.lookup(game_name, view))
