"""Async Wikipedia client for the search and page summary endpoints."""

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from .config import ResolverConfig
from .errors import InvalidInputError, LookupFailedError
from .models import SearchResult, SummaryDocument

logger = logging.getLogger(__name__)


class WikipediaClient:
    """
    Thin wrapper over the two Wikipedia endpoints the lookups need.

    Can be used as an async context manager, in which case it owns an
    httpx.AsyncClient for the duration of the block. An injected client is
    shared and left open.

    Usage:
        async with WikipediaClient(config) as wiki:
            result = await wiki.search("Hades video game")
    """

    def __init__(
        self,
        config: ResolverConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._http = http_client
        self._owns_client = False

    def __repr__(self) -> str:
        return f"WikipediaClient(search_url={self._config.search_url!r})"

    async def __aenter__(self) -> "WikipediaClient":
        if self._http is None:
            self._http = httpx.AsyncClient(
                headers=self._config.headers,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                follow_redirects=True,
            )
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._owns_client = False

    async def _get_json(self, stage: str, url: str, params: dict[str, Any] | None = None) -> Any:
        if self._http is None:
            raise RuntimeError("WikipediaClient must be used inside 'async with'")

        try:
            response = await self._http.get(
                url,
                params=params,
                headers=self._config.headers,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                follow_redirects=True,
            )
        except httpx.TimeoutException as e:
            raise LookupFailedError(
                stage, f"Wikipedia {stage} request timed out after {self._config.timeout_seconds}s", e
            ) from e
        except httpx.HTTPError as e:
            raise LookupFailedError(stage, f"Wikipedia {stage} request failed: {e}", e) from e

        if response.status_code != 200:
            raise LookupFailedError(
                stage, f"Wikipedia {stage} request returned HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise LookupFailedError(stage, f"Wikipedia {stage} response is not valid JSON", e) from e

    async def search(self, query: str) -> SearchResult:
        """
        Run a full-text search and pick the first candidate.

        Args:
            query: Search text, already carrying any disambiguating suffix

        Returns:
            SearchResult with the first hit's title, or None when nothing matched

        Raises:
            InvalidInputError: If the query is empty
            LookupFailedError: On network, status or parse failures
        """
        if not query or not query.strip():
            raise InvalidInputError("Search query cannot be empty")

        params = {
            "action": "query",
            "list": "search",
            "srsearch": query,
            "srlimit": self._config.search_limit,
            "utf8": "",
            "format": "json",
        }
        data = await self._get_json("search", self._config.search_url, params)

        query_block = (data.get("query") or {}) if isinstance(data, dict) else None
        if not isinstance(query_block, dict):
            raise LookupFailedError("search", "Wikipedia search response has unexpected shape")

        candidates = query_block.get("search") or []
        if not isinstance(candidates, list):
            raise LookupFailedError("search", "Wikipedia search response has unexpected shape")
        if not candidates:
            logger.info("No Wikipedia search results for '%s'", query)
            return SearchResult(canonical_title=None)

        first = candidates[0]
        title = first.get("title") if isinstance(first, dict) else None
        if not isinstance(title, str) or not title:
            raise LookupFailedError("search", "Wikipedia search result has no title")

        return SearchResult(canonical_title=title)

    async def fetch_summary(self, title: str) -> SummaryDocument:
        """
        Fetch the short abstract for a canonical page title.

        A missing extract is not an error; it comes back as an empty string.

        Raises:
            LookupFailedError: On network, status or parse failures
        """
        url = f"{self._config.summary_url}/{quote(title, safe='')}"
        data = await self._get_json("summary", url)

        if not isinstance(data, dict):
            raise LookupFailedError("summary", "Wikipedia summary response has unexpected shape")

        extract = data.get("extract") or ""
        page_title = data.get("title") or title
        if not isinstance(extract, str) or not isinstance(page_title, str):
            raise LookupFailedError("summary", "Wikipedia summary response has unexpected shape")

        return SummaryDocument(title=page_title, extract_text=extract)
