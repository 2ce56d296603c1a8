"""
Tool parameter contracts.

Bounds, defaults and requiredness for both tools, declared once with
pydantic. The ``Annotated`` aliases are used directly in the MCP tool
signatures so FastMCP publishes the same JSON schema and rejects bad
input before any request is made. The models can be validated on their
own, without a running server.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LIMIT = 10

LimitParam = Annotated[
    int,
    Field(ge=MIN_LIMIT, le=MAX_LIMIT, description=f"Number of articles to retrieve ({MIN_LIMIT}-{MAX_LIMIT})"),
]
KeywordParam = Annotated[
    str,
    Field(min_length=1, description="Keyword to search for in articles"),
]


class LatestArticlesParams(BaseModel):
    """Parameters of ``get-latest-articles``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    limit: LimitParam = DEFAULT_LIMIT


class SearchArticlesParams(BaseModel):
    """Parameters of ``search-articles``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    keyword: KeywordParam
    limit: LimitParam = DEFAULT_LIMIT


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "KeywordParam",
    "LatestArticlesParams",
    "LimitParam",
    "SearchArticlesParams",
]
