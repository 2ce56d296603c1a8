"""
Application Layer - Use cases.

Contains:
- articles: Latest/search article queries rendered as text
"""

from .articles import ArticleQueryService, LatestArticlesParams, SearchArticlesParams

__all__ = ["ArticleQueryService", "LatestArticlesParams", "SearchArticlesParams"]
