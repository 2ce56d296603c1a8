"""
Space Flight News MCP Server

A standalone Model Context Protocol server for space-flight news.

Features:
- Latest articles from the Spaceflight News API
- Keyword search over articles
- Plain-text output with fallbacks for missing fields and failed requests

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool registration
- tools/: Tool implementations
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any, cast

from mcp.server.fastmcp import FastMCP

from spaceflight_news import __version__
from spaceflight_news.container import ApplicationContainer
from spaceflight_news.infrastructure.sources import SPACEFLIGHT_NEWS_API_BASE

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import check_tool_registration, register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Sequence

    from spaceflight_news.application.articles import ArticleQueryService
    from spaceflight_news.infrastructure.sources import SpaceflightNewsClient

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "space-flight-news"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        """Application lifecycle: startup → yield → shutdown."""
        logger.info("Lifecycle: startup — resources ready")
        try:
            yield container
        finally:
            client = cast("SpaceflightNewsClient", container.client())
            await client.close()
            logger.info("Lifecycle: shutdown — HTTP client closed")

    return _lifespan


def create_server(
    name: str = DEFAULT_SERVER_NAME,
    base_url: str = SPACEFLIGHT_NEWS_API_BASE,
    timeout: float | None = None,
) -> FastMCP:
    """
    Create and configure the Space Flight News MCP server.

    Args:
        name: Server name.
        base_url: Spaceflight News API base URL.
        timeout: HTTP timeout in seconds. None keeps the httpx default.

    Returns:
        Configured FastMCP server instance.

    Raises:
        ConfigurationError: If ``base_url`` is not an http(s) URL.
    """
    global _container
    logger.info(f"Initializing Space Flight News MCP Server v{__version__}...")

    # ── DI container ────────────────────────────────────────────────────
    _container = ApplicationContainer()
    _container.config.from_dict({"base_url": base_url, "timeout": timeout})

    article_service = cast("ArticleQueryService", _container.article_service())

    # ── Create MCP server with lifespan ─────────────────────────────────
    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=_make_lifespan(_container),
    )

    # ── Register all tools via centralized registry ─────────────────────
    stats = register_all_mcp_tools(mcp, article_service)
    logger.info(f"Tool registration complete: {stats}")
    check_tool_registration(mcp)

    logger.info("Space Flight News MCP Server initialized successfully")
    return mcp


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spaceflight-news-mcp",
        description="Run the Space Flight News MCP server on stdio",
    )
    parser.add_argument(
        "--base-url",
        default=SPACEFLIGHT_NEWS_API_BASE,
        help=f"Spaceflight News API base URL (default: {SPACEFLIGHT_NEWS_API_BASE})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics log level, written to stderr (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run the MCP server."""
    args = _build_parser().parse_args(argv)

    # Configure logging (stdout carries the MCP protocol)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    # Published dates are rendered in the host locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply host locale for dates: {e}")

    try:
        server = create_server(base_url=args.base_url)
        logger.info("Space Flight News MCP Server running on stdio")
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.exception(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
