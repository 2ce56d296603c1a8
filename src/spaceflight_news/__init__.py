"""
Space Flight News MCP - Space-flight news tools for AI agents.

A Model Context Protocol server that fetches and searches articles from
the public Spaceflight News API and returns them as plain text.

Usage as standalone server:
    spaceflight-news-mcp
    python -m spaceflight_news.presentation.mcp_server

Usage as a library:
    from spaceflight_news import ArticleQueryService, SpaceflightNewsClient
    from spaceflight_news.application import LatestArticlesParams

    async with SpaceflightNewsClient() as client:
        service = ArticleQueryService(client)
        print(await service.get_latest_articles(LatestArticlesParams(limit=5)))
"""

__version__ = "1.0.0"

from .application import ArticleQueryService  # noqa: E402
from .domain import Article, ArticlesResponse  # noqa: E402
from .infrastructure import SPACEFLIGHT_NEWS_API_BASE, SpaceflightNewsClient  # noqa: E402

__all__ = [
    "SPACEFLIGHT_NEWS_API_BASE",
    "Article",
    "ArticleQueryService",
    "ArticlesResponse",
    "SpaceflightNewsClient",
    "__version__",
]
