"""
Article text formatting.

Each article renders as a fixed six-line block:

    Title: ...
    Published: ...
    Source: ...
    Summary: ...
    URL: ...
    ---

Missing or empty fields are replaced with fallback text, so no line is
ever dropped.
"""

from __future__ import annotations

from datetime import datetime

from spaceflight_news.domain.entities import Article, ArticlesResponse

UNKNOWN = "Unknown"
NO_SUMMARY = "No summary available"
NO_URL = "No URL available"
SEPARATOR = "---"


def format_published_date(published_at: str | None) -> str:
    """
    Render an ISO-8601 timestamp as a calendar date in the host locale.

    Aware timestamps are converted to local time first. Uses ``%x``, the
    locale's date representation (set via ``locale.setlocale`` at startup).
    """
    if not published_at:
        return UNKNOWN
    try:
        parsed = datetime.fromisoformat(published_at)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.strftime("%x")
    except (ValueError, OverflowError, OSError):
        return UNKNOWN


def format_article(article: Article) -> str:
    """Format one article as a text block ending with ``---``."""
    return "\n".join(
        [
            f"Title: {article.title or UNKNOWN}",
            f"Published: {format_published_date(article.published_at)}",
            f"Source: {article.news_site or UNKNOWN}",
            f"Summary: {article.summary or NO_SUMMARY}",
            f"URL: {article.url or NO_URL}",
            SEPARATOR,
        ]
    )


def format_articles(response: ArticlesResponse | None, fallback_message: str) -> str:
    """
    Format every article in a response.

    Returns ``fallback_message`` unchanged when there is no response or it
    holds no articles.
    """
    if response is None or response.is_empty:
        return fallback_message
    return "\n".join(format_article(article) for article in response.results)


__all__ = [
    "NO_SUMMARY",
    "NO_URL",
    "SEPARATOR",
    "UNKNOWN",
    "format_article",
    "format_articles",
    "format_published_date",
]
