"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from spaceflight_news.infrastructure.sources import SpaceflightNewsClient

# ============================================================
# Mock Spaceflight News API Responses
# ============================================================


@pytest.fixture
def full_article_data():
    """Article record with every field populated."""
    return {
        "id": 21345,
        "title": "SpaceX Launches New Satellite",
        "url": "https://spacenews.com/test-article",
        "image_url": "https://spacenews.com/test.jpg",
        "summary": "SpaceX successfully launched a new communications satellite.",
        "publishedAt": "2023-12-01T10:00:00Z",
        "updatedAt": "2023-12-01T12:00:00Z",
        "newsSite": "Space News",
        "featured": False,
    }


@pytest.fixture
def articles_payload(full_article_data):
    """Two-article page as returned by GET /articles."""
    second = {
        "id": 21346,
        "title": "Artemis II Crew Completes Training",
        "url": "https://nasa.gov/artemis-ii",
        "summary": "The four astronauts finished their final simulation.",
        "publishedAt": "2024-02-15T08:30:00Z",
        "newsSite": "NASA",
    }
    return {"count": 2, "next": None, "previous": None, "results": [full_article_data, second]}


@pytest.fixture
def empty_payload():
    return {"count": 0, "next": None, "previous": None, "results": []}


# ============================================================
# HTTP Fakes
# ============================================================


def json_handler(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with *payload* as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=json.dumps(payload), headers={"Content-Type": "application/json"})

    return handler


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording)


@pytest.fixture
def make_client():
    """Factory building a SpaceflightNewsClient backed by a RecordingTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[SpaceflightNewsClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return SpaceflightNewsClient(transport=transport), transport

    return _make
