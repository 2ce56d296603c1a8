"""
Fetch result type.

A ``FetchResult`` is either a parsed JSON payload or a failure marker
carrying the error that ended the request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import SpaceflightNewsError


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single upstream GET."""

    url: str
    payload: Any = None
    error: SpaceflightNewsError | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, payload: Any, status_code: int | None = None) -> FetchResult:
        return cls(url=url, payload=payload, status_code=status_code)

    @classmethod
    def failure(cls, url: str, error: SpaceflightNewsError, status_code: int | None = None) -> FetchResult:
        return cls(url=url, error=error, status_code=status_code)
