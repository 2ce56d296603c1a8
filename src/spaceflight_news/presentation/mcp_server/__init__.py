"""
Space Flight News MCP Server

This module provides a Model Context Protocol (MCP) server for space-flight news.

Usage as standalone server:
    python -m spaceflight_news.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "space-flight-news": {
                "type": "stdio",
                "command": "spaceflight-news-mcp"
            }
        }
    }

Usage for integration:
    from spaceflight_news.presentation.mcp_server import create_server, register_all_tools

    # Option 1: Create standalone server
    server = create_server()
    server.run()

    # Option 2: Register tools to existing server
    from spaceflight_news import ArticleQueryService, SpaceflightNewsClient
    register_all_tools(your_mcp_server, ArticleQueryService(SpaceflightNewsClient()))
"""

from __future__ import annotations

from .server import create_server, main
from .tools import register_all_tools

__all__ = ["create_server", "main", "register_all_tools"]
