"""
Domain Entities: Article, ArticlesResponse

Read-only projections of Spaceflight News API v4 records.
Field names follow Python conventions; ``from_dict`` accepts the
upstream camelCase keys (``publishedAt``, ``newsSite``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from spaceflight_news.shared.exceptions import ParseError

logger = logging.getLogger(__name__)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Article:
    """
    A single news item.

    Only ``id`` is required. Every other field may be missing or empty
    upstream; the formatter supplies fallback text for those.
    """

    id: int
    title: str | None = None
    url: str | None = None
    summary: str | None = None
    published_at: str | None = None  # ISO-8601 text, e.g. "2024-05-01T12:00:00Z"
    news_site: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Article:
        """
        Build an Article from an upstream ``results`` entry.

        Raises:
            ParseError: If ``data`` is not an object or has no positive integer ``id``
        """
        if not isinstance(data, dict):
            raise ParseError(f"Article record must be an object, got {type(data).__name__}")

        article_id = data.get("id")
        if isinstance(article_id, bool) or not isinstance(article_id, int) or article_id < 1:
            raise ParseError(f"Article record has invalid id: {article_id!r}")

        return cls(
            id=article_id,
            title=_optional_text(data.get("title")),
            url=_optional_text(data.get("url")),
            summary=_optional_text(data.get("summary")),
            published_at=_optional_text(data.get("publishedAt")),
            news_site=_optional_text(data.get("newsSite")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary using upstream key names."""
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "summary": self.summary,
            "publishedAt": self.published_at,
            "newsSite": self.news_site,
        }


@dataclass(frozen=True)
class ArticlesResponse:
    """
    One page of articles as returned by ``GET /articles``.

    ``results`` keeps upstream order. ``count`` is the upstream-reported
    total across all pages, not ``len(results)``.
    """

    results: tuple[Article, ...] = field(default_factory=tuple)
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.results

    @classmethod
    def from_dict(cls, data: Any) -> ArticlesResponse:
        """
        Build a response from a decoded JSON payload.

        Records without a valid ``id`` are skipped.

        Raises:
            ParseError: If the payload is not an object or ``results`` is not a list
        """
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

        raw_results = data.get("results")
        if raw_results is None:
            raw_results = []
        if not isinstance(raw_results, list):
            raise ParseError(f"'results' must be a list, got {type(raw_results).__name__}")

        articles: list[Article] = []
        for index, record in enumerate(raw_results):
            try:
                articles.append(Article.from_dict(record))
            except ParseError as e:
                logger.warning(f"Skipping article #{index}: {e}")

        count = data.get("count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            count = len(articles)

        return cls(results=tuple(articles), count=count)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary in upstream shape."""
        return {
            "results": [article.to_dict() for article in self.results],
            "count": self.count,
        }


__all__ = ["Article", "ArticlesResponse"]
