"""Unit tests for the CataasImageResolver."""

import httpx
import pytest

from cattery.infrastructure.images import CataasImageResolver


def _resolver(handler) -> CataasImageResolver:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CataasImageResolver("https://cataas.com", timeout=1.0, http_client=client)


@pytest.mark.asyncio
async def test_redirect_location_is_returned_without_following():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(302, headers={"Location": "/cat/abc123"})

    url = await _resolver(handler).resolve_image_url()

    assert url == "https://cataas.com/cat/abc123"
    assert len(requests) == 1
    assert requests[0].url.path == "/cat"
    assert "_ts" in requests[0].url.params


@pytest.mark.asyncio
async def test_absolute_location_is_kept():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(301, headers={"Location": "https://cdn.cataas.com/cat/xyz.jpg"})

    assert await _resolver(handler).resolve_image_url() == "https://cdn.cataas.com/cat/xyz.jpg"


@pytest.mark.asyncio
async def test_direct_image_uses_request_url():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"\xff\xd8", headers={"Content-Type": "image/jpeg"})

    url = await _resolver(handler).resolve_image_url()
    assert url is not None
    assert url.startswith("https://cataas.com/cat?_ts=")


@pytest.mark.asyncio
async def test_error_status_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    assert await _resolver(handler).resolve_image_url() is None


@pytest.mark.asyncio
async def test_redirect_without_location_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302)

    assert await _resolver(handler).resolve_image_url() is None


@pytest.mark.asyncio
async def test_network_failure_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert await _resolver(handler).resolve_image_url() is None
