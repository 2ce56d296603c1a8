"""
Domain Layer - Core business entities.

Pure data objects with no I/O.
"""

from .entities import Article, ArticlesResponse

__all__ = ["Article", "ArticlesResponse"]
