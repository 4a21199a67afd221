from __future__ import annotations

import httpx
import pytest

from utils.http_client import request_json


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_returns_parsed_json() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(200, json=[{"cca3": "DEU"}])

    async with _client(handler) as client:
        data = await request_json(
            "https://example.test/v3.1/name/germany", params={"fullText": "true"}, client=client
        )

    assert data == [{"cca3": "DEU"}]
    assert seen["url"] == "https://example.test/v3.1/name/germany?fullText=true"


@pytest.mark.asyncio
async def test_non_success_status_returns_none() -> None:
    async with _client(lambda request: httpx.Response(404, json={"status": 404})) as client:
        assert await request_json("https://example.test/missing", client=client) is None


@pytest.mark.asyncio
async def test_network_error_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        assert await request_json("https://example.test/all", client=client) is None


@pytest.mark.asyncio
async def test_invalid_json_returns_none() -> None:
    async with _client(lambda request: httpx.Response(200, text="<html>oops</html>")) as client:
        assert await request_json("https://example.test/all", client=client) is None


@pytest.mark.asyncio
async def test_malformed_url_returns_none() -> None:
    async with _client(lambda request: httpx.Response(200, json=[])) as client:
        assert await request_json("http://[::1", client=client) is None
