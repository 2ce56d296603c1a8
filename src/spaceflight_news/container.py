"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from spaceflight_news.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "base_url": "https://api.spaceflightnewsapi.net/v4",
        "timeout": None,
    })

    service = container.article_service()

    # In tests — override any provider:
    container.client.override(providers.Object(mock_client))
"""

from __future__ import annotations

import logging
import urllib.parse

from dependency_injector import containers, providers

from spaceflight_news.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _create_client(base_url: str, timeout: float | None) -> object:
    """Lazy factory for SpaceflightNewsClient."""
    from spaceflight_news.infrastructure.sources import SpaceflightNewsClient

    parsed = urllib.parse.urlparse(base_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        msg = f"Invalid API base URL: {base_url!r} (expected http:// or https://)"
        raise ConfigurationError(msg)

    logger.info(f"Spaceflight News API base: {base_url}")
    return SpaceflightNewsClient(base_url=base_url, timeout=timeout)


def _create_article_service(client: object) -> object:
    """Lazy factory for ArticleQueryService."""
    from spaceflight_news.application.articles import ArticleQueryService

    return ArticleQueryService(client)  # type: ignore[arg-type]


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the Space Flight News MCP application.

    - ``client``: shared Spaceflight News HTTP client
    - ``article_service``: latest/search article queries
    """

    config = providers.Configuration()

    client = providers.Singleton(
        _create_client,
        base_url=config.base_url,
        timeout=config.timeout,
    )

    article_service = providers.Singleton(
        _create_article_service,
        client=client,
    )


__all__ = ["ApplicationContainer"]
