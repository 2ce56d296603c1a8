"""
Tests for tool_registry module.
"""

from unittest.mock import MagicMock

import pytest
from mcp.server.fastmcp import FastMCP

from spaceflight_news.presentation.mcp_server.tool_registry import (
    TOOL_CATEGORIES,
    check_tool_registration,
    get_tool_info,
    list_registered_tools,
    register_all_mcp_tools,
    validate_tool_registry,
)


@pytest.fixture
def registered_mcp():
    mcp = FastMCP("test")
    register_all_mcp_tools(mcp, MagicMock())
    return mcp


class TestToolCategories:
    def test_categories(self):
        assert set(TOOL_CATEGORIES) == {"articles"}
        for cat_info in TOOL_CATEGORIES.values():
            assert {"name", "description", "tools"} <= set(cat_info)

    def test_list_registered_tools(self):
        assert list_registered_tools() == {"articles": ["get-latest-articles", "search-articles"]}

    def test_list_is_a_copy(self):
        listed = list_registered_tools()
        listed["articles"].append("other")
        assert "other" not in TOOL_CATEGORIES["articles"]["tools"]

    def test_get_tool_info(self):
        info = get_tool_info("search-articles")
        assert info["category_id"] == "articles"
        assert info["name"] == "search-articles"

    def test_get_tool_info_unknown(self):
        assert get_tool_info("nonexistent_tool") is None


class TestRegistration:
    def test_register_returns_stats(self):
        stats = register_all_mcp_tools(FastMCP("test"), MagicMock())
        assert stats == {"articles": 2}

    def test_validate_synchronized(self, registered_mcp):
        result = validate_tool_registry(registered_mcp)
        assert result["valid"] is True
        assert result["missing"] == []
        assert result["extra"] == []
        assert result["registered"] == ["get-latest-articles", "search-articles"]

    def test_validate_missing(self):
        result = validate_tool_registry(FastMCP("empty"))
        assert result["valid"] is False
        assert result["missing"] == ["get-latest-articles", "search-articles"]

    def test_validate_extra(self, registered_mcp):
        @registered_mcp.tool(name="extra-tool")
        def extra_tool() -> str:
            return "x"

        result = validate_tool_registry(registered_mcp)
        assert result["valid"] is False
        assert result["extra"] == ["extra-tool"]

    def test_validate_without_tool_manager(self):
        result = validate_tool_registry(object())
        assert result["valid"] is False
        assert "error" in result

    def test_check_ok(self, registered_mcp):
        assert check_tool_registration(registered_mcp) is True

    def test_check_fails(self):
        assert check_tool_registration(FastMCP("empty")) is False

    def test_check_raises(self):
        with pytest.raises(RuntimeError, match="Missing"):
            check_tool_registration(FastMCP("empty"), raise_on_error=True)
