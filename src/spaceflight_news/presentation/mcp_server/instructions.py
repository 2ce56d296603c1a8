"""
MCP Server Instructions - Usage guide for AI agents.

Kept apart from server.py so it can be maintained on its own.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Space Flight News MCP Server - space-flight news for AI agents

Data source: Spaceflight News API v4 (https://api.spaceflightnewsapi.net/v4)

## Tools
───────────────────────────────────────────────────────────────────────────────
get-latest-articles(limit=10)
    Most recently published articles, newest first.

search-articles(keyword, limit=10)
    Articles whose title or summary matches the keyword.

`limit` must be between 1 and 50. `keyword` must not be empty.

## Output
───────────────────────────────────────────────────────────────────────────────
Plain text. Each article is one block:

    Title: <title>
    Published: <date>
    Source: <news site>
    Summary: <summary>
    URL: <link>
    ---

When the API is unreachable or nothing matches, a single fallback line is
returned instead (e.g. 'No articles found for keyword: "..."'). Retry later
or try a broader keyword; the tools never return a protocol error.
"""
