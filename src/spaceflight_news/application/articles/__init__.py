"""
Articles Application Module

Provides:
- params: Declarative tool parameter contracts (pydantic)
- formatter: Article → text rendering with fallbacks
- service: ArticleQueryService composing fetch and format
"""

from .formatter import format_article, format_articles, format_published_date
from .params import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    KeywordParam,
    LatestArticlesParams,
    LimitParam,
    SearchArticlesParams,
)
from .service import (
    LATEST_ARTICLES_HEADER,
    NO_LATEST_ARTICLES,
    ArticleQueryService,
    no_search_results,
    search_results_header,
)

__all__ = [
    "DEFAULT_LIMIT",
    "LATEST_ARTICLES_HEADER",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "NO_LATEST_ARTICLES",
    "ArticleQueryService",
    "KeywordParam",
    "LatestArticlesParams",
    "LimitParam",
    "SearchArticlesParams",
    "format_article",
    "format_articles",
    "format_published_date",
    "no_search_results",
    "search_results_header",
]
