"""
Space Flight News MCP Tools

✅ Articles (2):
- get-latest-articles: Latest space-flight news
- search-articles: Keyword search

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, article_service)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .articles import GET_LATEST_ARTICLES, SEARCH_ARTICLES, register_article_tools

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from spaceflight_news.application.articles import ArticleQueryService


def register_all_tools(mcp: FastMCP, service: ArticleQueryService) -> None:
    """Register every tool on *mcp*."""
    # 1. Articles (2 tools)
    register_article_tools(mcp, service)  # get-latest-articles, search-articles


__all__ = [
    "GET_LATEST_ARTICLES",
    "SEARCH_ARTICLES",
    "register_all_tools",
    "register_article_tools",
]
