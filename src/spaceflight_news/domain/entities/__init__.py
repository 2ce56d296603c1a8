"""
Domain Entities - Core business objects.

Entities:
- Article: Single space-flight news item
- ArticlesResponse: One page of articles from the upstream API
"""

from .article import Article, ArticlesResponse

__all__ = ["Article", "ArticlesResponse"]
