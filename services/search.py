"""
Web search service using the Brave Search API.
Search is best-effort: every failure degrades to an empty result set.
"""
from typing import List
import httpx

from config import Config
from models.chat_models import SearchResult, SearchOutcome
from utils.constants import SEARCH_RESULTS_HEADER
from utils.exceptions import SearchFailure
from utils.logger import app_logger
from utils.http_client import HTTPClientManager


class SearchService:
    """Service for performing web searches."""

    def __init__(self, config: Config):
        """
        Initialize SearchService with application config.

        Args:
            config: Immutable application configuration
        """
        self.config = config

    async def search(self, query: str) -> SearchOutcome:
        """
        Search the web for a query. Never raises.

        Args:
            query: Search query string (the raw user message)

        Returns:
            SearchOutcome with up to max_search_results results, or the failure reason
        """
        if not self.config.search_enabled:
            app_logger.warning("Web search requested but no usable BRAVE_SEARCH_API_KEY is configured")
            return SearchOutcome.failure("search disabled")

        try:
            results = await self._fetch_results(query)
        except SearchFailure as e:
            app_logger.error(f"Web search error: {e.details}")
            return SearchOutcome.failure(e.details)

        app_logger.info(f"Web search returned {len(results)} usable results")
        return SearchOutcome(results=results)

    async def _fetch_results(self, query: str) -> List[SearchResult]:
        """
        Call the search API and parse the results.

        Raises:
            SearchFailure: on transport errors, timeouts, non-2xx status or malformed body
        """
        client = HTTPClientManager.get_search_client()

        try:
            response = await client.get(
                self.config.brave_search_url,
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip",
                    "X-Subscription-Token": self.config.brave_search_api_key
                },
                params={
                    "q": query,
                    "count": self.config.search_results_count,
                },
                timeout=self.config.search_timeout
            )
        except httpx.TimeoutException as e:
            raise SearchFailure(f"Search timed out: {e}") from e
        except httpx.RequestError as e:
            raise SearchFailure(f"Search request failed: {e}") from e

        if response.status_code == 401:
            raise SearchFailure("Invalid search API key")
        elif response.status_code == 429:
            raise SearchFailure("Search API rate limit exceeded")
        elif not response.is_success:
            raise SearchFailure(f"Search API error (status {response.status_code})")

        try:
            data = response.json()
        except ValueError as e:
            raise SearchFailure("Search API returned malformed JSON") from e

        return self._parse_results(data)

    def _parse_results(self, data) -> List[SearchResult]:
        """Take the first results in the order the provider ranked them."""
        if not isinstance(data, dict):
            raise SearchFailure("Search API returned an unexpected body")

        web = data.get("web") or {}
        items = web.get("results") if isinstance(web, dict) else None
        if not items:
            return []
        if not isinstance(items, list):
            raise SearchFailure("Search API returned an unexpected body")

        usable = [SearchResult.from_api(item) for item in items if isinstance(item, dict)]
        return usable[:self.config.max_search_results]

    @staticmethod
    def format_results(results: List[SearchResult]) -> str:
        """
        Format search results into the prompt block.

        Returns:
            Numbered entries separated by blank lines, or "" when there are no results
        """
        if not results:
            return ""

        entries = [
            f"{index}. {result.title}\n   {result.description}\n   Source: {result.url}"
            for index, result in enumerate(results, start=1)
        ]
        return SEARCH_RESULTS_HEADER + "\n\n".join(entries)
