"""
Spaceflight News API Integration

Provides access to the public Spaceflight News API (v4) for recent
space-flight articles and keyword search.

API Documentation: https://api.spaceflightnewsapi.net/v4/docs/

Endpoints used:
- GET /articles?limit={n}
- GET /articles?search={keyword}&limit={n}

No authentication is required. Only the first page of results is read.
"""

from __future__ import annotations

import logging
import urllib.parse

import httpx

from spaceflight_news import __version__
from spaceflight_news.domain.entities import ArticlesResponse
from spaceflight_news.shared.exceptions import ParseError
from spaceflight_news.shared.result import FetchResult

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)

# Spaceflight News API endpoint
SPACEFLIGHT_NEWS_API_BASE = "https://api.spaceflightnewsapi.net/v4"

# Characters kept as-is in query values besides letters, digits and "-_.~"
_QUERY_SAFE_CHARS = "!*'()"


def encode_query_value(value: str) -> str:
    """
    Percent-encode a query string value.

    Spaces become ``%20`` (not ``+``), and ``&``, ``%``, ``+``, ``/`` and
    ``=`` are all escaped.
    """
    return urllib.parse.quote(value, safe=_QUERY_SAFE_CHARS)


def build_latest_articles_url(limit: int, base_url: str = SPACEFLIGHT_NEWS_API_BASE) -> str:
    """URL for the most recent ``limit`` articles."""
    return f"{base_url.rstrip('/')}/articles?limit={limit}"


def build_search_articles_url(keyword: str, limit: int, base_url: str = SPACEFLIGHT_NEWS_API_BASE) -> str:
    """URL for up to ``limit`` articles matching ``keyword``."""
    return f"{base_url.rstrip('/')}/articles?search={encode_query_value(keyword)}&limit={limit}"


class SpaceflightNewsClient(BaseAPIClient):
    """
    Spaceflight News API client.

    Usage:
        async with SpaceflightNewsClient() as client:
            latest = await client.get_latest_articles(limit=5)
            found = await client.search_articles("Artemis", limit=10)

    Every method returns None instead of raising when the upstream is
    unreachable, answers with an error status or sends malformed JSON.
    """

    _service_name = "SpaceflightNews"

    def __init__(
        self,
        base_url: str = SPACEFLIGHT_NEWS_API_BASE,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Spaceflight News client.

        Args:
            base_url: API base URL (override for mirrors or test servers)
            timeout: Request timeout in seconds; None keeps the httpx default
            transport: Optional httpx transport
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": f"spaceflight-news-mcp/{__version__}",
            },
            transport=transport,
        )

    def latest_articles_url(self, limit: int) -> str:
        return build_latest_articles_url(limit, self._base_url)

    def search_articles_url(self, keyword: str, limit: int) -> str:
        return build_search_articles_url(keyword, limit, self._base_url)

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL and return the raw decoded payload or the failure."""
        return await self._make_request(url)

    async def fetch_articles(self, url: str) -> ArticlesResponse | None:
        """
        Fetch and decode one page of articles.

        Args:
            url: Full articles URL (see ``latest_articles_url``/``search_articles_url``)

        Returns:
            ArticlesResponse, or None on any network, HTTP or payload failure
        """
        result = await self.fetch(url)
        if not result.ok:
            logger.error(f"Error making Space Flight News request: {result.error}")
            return None

        try:
            return ArticlesResponse.from_dict(result.payload)
        except ParseError as e:
            logger.error(f"Error making Space Flight News request: {e}")
            return None

    async def get_latest_articles(self, limit: int = 10) -> ArticlesResponse | None:
        """
        Get the most recently published articles.

        Args:
            limit: Number of articles (1-50)
        """
        return await self.fetch_articles(self.latest_articles_url(limit))

    async def search_articles(self, keyword: str, limit: int = 10) -> ArticlesResponse | None:
        """
        Search articles by keyword (matched against title and summary upstream).

        Args:
            keyword: Search text
            limit: Number of articles (1-50)
        """
        return await self.fetch_articles(self.search_articles_url(keyword, limit))


__all__ = [
    "SPACEFLIGHT_NEWS_API_BASE",
    "SpaceflightNewsClient",
    "build_latest_articles_url",
    "build_search_articles_url",
    "encode_query_value",
]
