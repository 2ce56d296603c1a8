"""
Article Tools - Latest news and keyword search.

Tools:
- get-latest-articles: Most recent space-flight news
- search-articles: Articles matching a keyword

Both tools always return text. Upstream failures and empty results are
reported with a fallback message, never as a protocol error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spaceflight_news.application.articles import (
    DEFAULT_LIMIT,
    LATEST_ARTICLES_HEADER,
    NO_LATEST_ARTICLES,
    KeywordParam,
    LatestArticlesParams,
    LimitParam,
    SearchArticlesParams,
    no_search_results,
    search_results_header,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from spaceflight_news.application.articles import ArticleQueryService

logger = logging.getLogger(__name__)

GET_LATEST_ARTICLES = "get-latest-articles"
SEARCH_ARTICLES = "search-articles"


def register_article_tools(mcp: FastMCP, service: ArticleQueryService) -> None:
    """Register latest/search article tools."""

    @mcp.tool(name=GET_LATEST_ARTICLES, description="Get latest space flight news articles")
    async def get_latest_articles(limit: LimitParam = DEFAULT_LIMIT) -> str:
        """
        Get latest space flight news articles.

        Args:
            limit: Number of articles to retrieve (1-50, default 10)

        Returns:
            "Latest space flight news:" followed by one block per article
            (Title, Published, Source, Summary, URL, ---), or
            "No latest articles available." when nothing could be fetched.
        """
        logger.info(f"{GET_LATEST_ARTICLES}: limit={limit}")
        try:
            return await service.get_latest_articles(LatestArticlesParams(limit=limit))
        except Exception as e:
            logger.exception(f"{GET_LATEST_ARTICLES} failed: {e}")
            return f"{LATEST_ARTICLES_HEADER}{NO_LATEST_ARTICLES}"

    @mcp.tool(name=SEARCH_ARTICLES, description="Search space flight news articles by keyword")
    async def search_articles(keyword: KeywordParam, limit: LimitParam = DEFAULT_LIMIT) -> str:
        """
        Search space flight news articles by keyword.

        Args:
            keyword: Keyword to search for in articles (e.g. "Artemis", "SpaceX Starship")
            limit: Number of articles to retrieve (1-50, default 10)

        Returns:
            'Search results for "<keyword>":' followed by one block per article,
            or 'No articles found for keyword: "<keyword>"'.
        """
        logger.info(f"{SEARCH_ARTICLES}: keyword={keyword!r}, limit={limit}")
        try:
            return await service.search_articles(SearchArticlesParams(keyword=keyword, limit=limit))
        except Exception as e:
            logger.exception(f"{SEARCH_ARTICLES} failed: {e}")
            return f"{search_results_header(keyword)}{no_search_results(keyword)}"
