"""
Article Query Service.

Composes URL building, fetching and formatting for the two tools.
Every failure path ends in a fallback message; nothing is raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .formatter import format_articles
from .params import LatestArticlesParams, SearchArticlesParams

if TYPE_CHECKING:
    from spaceflight_news.infrastructure.sources import SpaceflightNewsClient

logger = logging.getLogger(__name__)

LATEST_ARTICLES_HEADER = "Latest space flight news:\n\n"
NO_LATEST_ARTICLES = "No latest articles available."


def search_results_header(keyword: str) -> str:
    return f'Search results for "{keyword}":\n\n'


def no_search_results(keyword: str) -> str:
    return f'No articles found for keyword: "{keyword}"'


class ArticleQueryService:
    """
    Fetch and render space-flight news for agents.

    Usage:
        service = ArticleQueryService(SpaceflightNewsClient())
        text = await service.get_latest_articles(LatestArticlesParams(limit=5))
    """

    def __init__(self, client: SpaceflightNewsClient) -> None:
        self._client = client

    @property
    def client(self) -> SpaceflightNewsClient:
        return self._client

    async def fetch_and_format(self, url: str, fallback_message: str) -> str:
        """Fetch one page of articles and format it, or return the fallback."""
        response = await self._client.fetch_articles(url)
        if response is not None:
            logger.debug(f"Received {len(response.results)} of {response.count} articles from {url}")
        return format_articles(response, fallback_message)

    async def get_latest_articles(self, params: LatestArticlesParams) -> str:
        url = self._client.latest_articles_url(params.limit)
        message = await self.fetch_and_format(url, NO_LATEST_ARTICLES)
        return f"{LATEST_ARTICLES_HEADER}{message}"

    async def search_articles(self, params: SearchArticlesParams) -> str:
        url = self._client.search_articles_url(params.keyword, params.limit)
        message = await self.fetch_and_format(url, no_search_results(params.keyword))
        return f"{search_results_header(params.keyword)}{message}"


__all__ = [
    "LATEST_ARTICLES_HEADER",
    "NO_LATEST_ARTICLES",
    "ArticleQueryService",
    "no_search_results",
    "search_results_header",
]
