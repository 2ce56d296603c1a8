"""
Tests for ArticleQueryService (fetch + format composition).
"""

from unittest.mock import AsyncMock, MagicMock

import httpx

from conftest import json_handler

from spaceflight_news.application.articles import (
    ArticleQueryService,
    LatestArticlesParams,
    SearchArticlesParams,
    format_article,
)
from spaceflight_news.domain.entities import Article, ArticlesResponse


class TestLatestArticles:
    async def test_success(self, make_client, articles_payload):
        client, transport = make_client(json_handler(articles_payload))
        async with client:
            text = await ArticleQueryService(client).get_latest_articles(LatestArticlesParams(limit=5))

        assert str(transport.requests[0].url) == "https://api.spaceflightnewsapi.net/v4/articles?limit=5"
        assert text.startswith("Latest space flight news:\n\n")
        assert "Title: SpaceX Launches New Satellite" in text
        assert "Source: NASA" in text
        assert text.count("---") == 2

    async def test_default_limit(self, make_client, empty_payload):
        client, transport = make_client(json_handler(empty_payload))
        async with client:
            await ArticleQueryService(client).get_latest_articles(LatestArticlesParams())
        assert transport.requests[0].url.params["limit"] == "10"

    async def test_http_404_gives_fallback(self, make_client):
        client, _ = make_client(json_handler({"detail": "Not found."}, status_code=404))
        async with client:
            text = await ArticleQueryService(client).get_latest_articles(LatestArticlesParams(limit=5))
        assert text == "Latest space flight news:\n\nNo latest articles available."

    async def test_empty_gives_fallback(self, make_client, empty_payload):
        client, _ = make_client(json_handler(empty_payload))
        async with client:
            text = await ArticleQueryService(client).get_latest_articles(LatestArticlesParams())
        assert text == "Latest space flight news:\n\nNo latest articles available."

    async def test_idempotent(self, make_client, articles_payload):
        client, _ = make_client(json_handler(articles_payload))
        async with client:
            service = ArticleQueryService(client)
            first = await service.get_latest_articles(LatestArticlesParams(limit=3))
            second = await service.get_latest_articles(LatestArticlesParams(limit=3))
        assert first == second


class TestSearchArticles:
    async def test_success(self, make_client, articles_payload):
        client, transport = make_client(json_handler(articles_payload))
        async with client:
            text = await ArticleQueryService(client).search_articles(SearchArticlesParams(keyword="NASA Mars"))

        assert str(transport.requests[0].url) == (
            "https://api.spaceflightnewsapi.net/v4/articles?search=NASA%20Mars&limit=10"
        )
        assert text.startswith('Search results for "NASA Mars":\n\n')
        assert "Title: Artemis II Crew Completes Training" in text

    async def test_no_results(self, make_client, empty_payload):
        client, _ = make_client(json_handler(empty_payload))
        async with client:
            text = await ArticleQueryService(client).search_articles(SearchArticlesParams(keyword="zzzznotfound"))

        assert text == 'Search results for "zzzznotfound":\n\nNo articles found for keyword: "zzzznotfound"'
        assert text.endswith('No articles found for keyword: "zzzznotfound"')

    async def test_network_failure_gives_fallback(self, make_client):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client, _ = make_client(handler)
        async with client:
            text = await ArticleQueryService(client).search_articles(SearchArticlesParams(keyword="Starship", limit=3))
        assert text == 'Search results for "Starship":\n\nNo articles found for keyword: "Starship"'

    async def test_failure_causes_collapse_to_same_text(self, make_client):
        def unreachable(request):
            raise httpx.ConnectError("down", request=request)

        handlers = [
            json_handler({"detail": "x"}, status_code=500),
            lambda request: httpx.Response(200, text="not json"),
            unreachable,
        ]
        outputs = set()
        for handler in handlers:
            client, _ = make_client(handler)
            async with client:
                outputs.add(await ArticleQueryService(client).search_articles(SearchArticlesParams(keyword="ISS")))
        assert outputs == {'Search results for "ISS":\n\nNo articles found for keyword: "ISS"'}


class TestFetchAndFormat:
    async def test_uses_client_and_formats(self):
        article = Article(id=1, title="Only")
        client = MagicMock()
        client.fetch_articles = AsyncMock(return_value=ArticlesResponse(results=(article,), count=1))

        text = await ArticleQueryService(client).fetch_and_format("http://x/articles?limit=1", "fallback")

        client.fetch_articles.assert_awaited_once_with("http://x/articles?limit=1")
        assert text == format_article(article)

    async def test_absent_response(self):
        client = MagicMock()
        client.fetch_articles = AsyncMock(return_value=None)
        assert await ArticleQueryService(client).fetch_and_format("u", "nothing here") == "nothing here"

    def test_client_property(self):
        client = MagicMock()
        assert ArticleQueryService(client).client is client
