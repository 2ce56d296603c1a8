"""
Tool Registry - Central place for MCP tool registration.

Usage:
    from .tool_registry import register_all_mcp_tools, list_registered_tools

    # Register every tool
    register_all_mcp_tools(mcp, article_service)

    # Inspect declared tools
    tools = list_registered_tools()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from spaceflight_news.application.articles import ArticleQueryService

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES: dict[str, dict[str, Any]] = {
    "articles": {
        "name": "Articles",
        "description": "Latest space-flight news and keyword search",
        "tools": ["get-latest-articles", "search-articles"],
    },
}


# ============================================================================
# Registration
# ============================================================================


def register_all_mcp_tools(mcp: FastMCP, article_service: ArticleQueryService) -> dict[str, int]:
    """
    Register all MCP tools.

    Args:
        mcp: FastMCP server instance
        article_service: ArticleQueryService instance

    Returns:
        Dict with category names and tool counts
    """
    from .tools import register_all_tools

    logger.info("Registering article tools...")
    register_all_tools(mcp, article_service)

    stats = {cat_id: len(cat_info["tools"]) for cat_id, cat_info in TOOL_CATEGORIES.items()}
    logger.info(f"Total registered: {sum(stats.values())} tools")
    return stats


def list_registered_tools() -> dict[str, list[str]]:
    """
    List every declared tool, grouped by category.

    Returns:
        Dict with category ids as keys and tool name lists as values
    """
    return {cat_id: list(cat_info["tools"]) for cat_id, cat_info in TOOL_CATEGORIES.items()}


def get_tool_info(tool_name: str) -> dict[str, str] | None:
    """
    Get category information for a tool.

    Returns:
        Dict with name, category and description, or None if not declared
    """
    for cat_id, cat_info in TOOL_CATEGORIES.items():
        if tool_name in cat_info["tools"]:
            return {
                "name": tool_name,
                "category": cat_info["name"],
                "category_id": cat_id,
                "category_description": cat_info["description"],
            }
    return None


# ============================================================================
# Validation
# ============================================================================


def validate_tool_registry(mcp: FastMCP) -> dict[str, Any]:
    """
    Check that TOOL_CATEGORIES matches the tools actually registered.

    Returns:
        Dict with:
        - defined: Tools in TOOL_CATEGORIES
        - registered: Actually registered tools
        - missing: Defined but not registered
        - extra: Registered but not defined
        - valid: True if fully synchronized
    """
    defined_tools: set[str] = set()
    for cat_info in TOOL_CATEGORIES.values():
        defined_tools.update(cat_info["tools"])

    try:
        registered_tools = {tool.name for tool in mcp._tool_manager.list_tools()}
    except AttributeError:
        logger.warning("Cannot access registered tools from FastMCP instance")
        return {
            "defined": sorted(defined_tools),
            "registered": [],
            "missing": [],
            "extra": [],
            "valid": False,
            "error": "Cannot access FastMCP tools registry",
        }

    missing = defined_tools - registered_tools
    extra = registered_tools - defined_tools

    if missing:
        logger.warning(f"Tools defined but not registered: {sorted(missing)}")
    if extra:
        logger.info(f"Tools registered but not in TOOL_CATEGORIES: {sorted(extra)}")

    return {
        "defined": sorted(defined_tools),
        "registered": sorted(registered_tools),
        "missing": sorted(missing),
        "extra": sorted(extra),
        "valid": not missing and not extra,
    }


def check_tool_registration(mcp: FastMCP, raise_on_error: bool = False) -> bool:
    """
    Startup check that every declared tool is registered.

    Args:
        mcp: FastMCP server instance
        raise_on_error: If True, raise RuntimeError on mismatch

    Returns:
        True if all tools are properly registered
    """
    result = validate_tool_registry(mcp)

    if not result["valid"]:
        msg = f"Tool registry validation failed. Missing: {result['missing']}, Extra: {result['extra']}"
        if raise_on_error:
            raise RuntimeError(msg)
        logger.error(msg)
        return False

    logger.info(f"Tool registry validated: {len(result['registered'])} tools registered")
    return True


__all__ = [
    "TOOL_CATEGORIES",
    "check_tool_registration",
    "get_tool_info",
    "list_registered_tools",
    "register_all_mcp_tools",
    "validate_tool_registry",
]
