"""
External API Sources.

- base_client: Shared httpx GET/trace/error-isolation pattern
- spaceflight_news: Spaceflight News API v4 client and URL builders
"""

from .base_client import BaseAPIClient
from .spaceflight_news import (
    SPACEFLIGHT_NEWS_API_BASE,
    SpaceflightNewsClient,
    build_latest_articles_url,
    build_search_articles_url,
    encode_query_value,
)

__all__ = [
    "SPACEFLIGHT_NEWS_API_BASE",
    "BaseAPIClient",
    "SpaceflightNewsClient",
    "build_latest_articles_url",
    "build_search_articles_url",
    "encode_query_value",
]
