"""Unit tests for the gallery client, run against a mocked API."""

import asyncio
import json
import math

import httpx
import pytest

from cattery.client import ApiError, CatteryApiClient, GalleryClient, ViewState

TOKEN = "a" * 64


class FakeApi:
    """Just enough of the REST API to drive the gallery."""

    def __init__(self, total: int = 9):
        self.cats = [{"id": i, "name": f"Cat {i}", "tag": "Tabby", "img": ""} for i in range(total, 0, -1)]
        self.requests: list[httpx.Request] = []
        self.adopted: set[int] = set()
        self.fail_with: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/auth/login":
            return httpx.Response(200, json={"message": "ok", "user": {}, "token": TOKEN, "expiresAt": ""})
        if path == "/api/auth/logout":
            return httpx.Response(200, json={"message": "Logged out successfully."})

        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return httpx.Response(401, json={"error": "Authentication required. Please log in."})
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "Query failed."})

        if path == "/api/cats" and request.method == "GET":
            return httpx.Response(200, json=self._page(request.url.params))
        if path == "/api/cats" and request.method == "POST":
            body = json.loads(request.content)
            if not body.get("name"):
                return httpx.Response(400, json={"error": "Name and Tag are required fields."})
            new_id = max((c["id"] for c in self.cats), default=0) + 1
            self.cats.insert(0, {"id": new_id, **body})
            return httpx.Response(201, json={"message": "Cat successfully created.", "id": new_id})
        if path.startswith("/api/cats/") and request.method == "DELETE":
            cat_id = int(path.rsplit("/", 1)[1])
            self.cats = [c for c in self.cats if c["id"] != cat_id]
            return httpx.Response(200, json={"message": "deleted", "id": cat_id})
        if path.startswith("/api/adoptions/cat/"):
            cat_id = int(path.rsplit("/", 1)[1])
            adopted = cat_id in self.adopted
            return httpx.Response(200, json={"catId": cat_id, "count": int(adopted), "userAdopted": adopted})
        if path == "/api/adoptions" and request.method == "POST":
            self.adopted.add(json.loads(request.content)["cat_id"])
            return httpx.Response(201, json={"message": "ok"})
        if path.startswith("/api/adoptions/") and request.method == "DELETE":
            self.adopted.discard(int(path.rsplit("/", 1)[1]))
            return httpx.Response(200, json={"message": "ok"})
        return httpx.Response(404, json={"error": "Not found."})

    def _page(self, params: httpx.QueryParams) -> dict:
        page = int(params.get("page", 1))
        limit = int(params.get("limit", 8))
        search = params.get("search", "").lower()
        tag = params.get("tagFilter", "")
        matches = [
            c for c in self.cats
            if (not search or search in c["name"].lower()) and (not tag or c["tag"] == tag)
        ]
        start = (page - 1) * limit
        return {
            "cats": matches[start : start + limit],
            "totalCount": len(matches),
            "totalPages": math.ceil(len(matches) / limit),
            "currentPage": page,
            "limit": limit,
        }

    def list_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/cats" and r.method == "GET"]


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api: FakeApi) -> CatteryApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(api.handler))
    return CatteryApiClient("http://test", http_client=http)


@pytest.fixture
def gallery(client: CatteryApiClient) -> GalleryClient:
    return GalleryClient(client, debounce_seconds=0.01)


@pytest.mark.asyncio
async def test_anonymous_refresh_shows_login_required(gallery: GalleryClient):
    state = await gallery.refresh()
    assert state is ViewState.LOGIN_REQUIRED
    assert gallery.page is None
    assert gallery.message


@pytest.mark.asyncio
async def test_login_then_paging(gallery: GalleryClient, client: CatteryApiClient):
    await client.login("alice", "secret1")
    assert client.is_authenticated

    assert await gallery.refresh() is ViewState.READY
    assert len(gallery.page.cats) == 8
    assert gallery.page_info() == "Page 1 of 2 (9 total cats)"
    assert gallery.has_previous is False
    assert await gallery.previous_page() is False

    assert await gallery.next_page() is True
    assert gallery.current_page == 2
    assert len(gallery.page.cats) == 1
    assert gallery.has_next is False
    assert await gallery.next_page() is False


@pytest.mark.asyncio
async def test_debounced_search_only_fires_once(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    await gallery.refresh()
    await gallery.next_page()
    before = len(api.list_requests())

    first = gallery.search_input("Ca")
    second = gallery.search_input("  Cat 3 ")
    await second

    assert first.cancelled()
    assert len(api.list_requests()) == before + 1
    assert gallery.search == "Cat 3"
    assert gallery.current_page == 1
    assert api.list_requests()[-1].url.params["search"] == "Cat 3"


@pytest.mark.asyncio
async def test_unchanged_search_does_not_refetch(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    await gallery.refresh()
    before = len(api.list_requests())

    await gallery.search_input("   ")

    assert len(api.list_requests()) == before


@pytest.mark.asyncio
async def test_empty_result_state(gallery: GalleryClient, client):
    await client.login("alice", "secret1")
    await gallery.search_input("no such cat")
    assert gallery.state is ViewState.EMPTY
    assert gallery.page_info() is None


@pytest.mark.asyncio
async def test_tag_filter_resets_page(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    await gallery.refresh()
    await gallery.next_page()

    await gallery.set_tag_filter(" Tabby ")

    assert gallery.current_page == 1
    assert api.list_requests()[-1].url.params["tagFilter"] == "Tabby"


@pytest.mark.asyncio
async def test_save_resets_page_and_search(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    await gallery.search_input("Cat")
    await gallery.next_page()

    await gallery.save_cat({"name": "Tom", "tag": "Tabby"})

    assert gallery.current_page == 1
    assert gallery.search == ""
    assert gallery.page.cats[0]["name"] == "Tom"
    assert gallery.page.total_count == 10


@pytest.mark.asyncio
async def test_save_validation_error_surfaces(gallery: GalleryClient, client):
    await client.login("alice", "secret1")
    with pytest.raises(ApiError) as excinfo:
        await gallery.save_cat({"name": "", "tag": "Tabby"})
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Name and Tag are required fields."


@pytest.mark.asyncio
async def test_delete_last_cat_on_page_steps_back(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    await gallery.refresh()
    await gallery.next_page()
    only = gallery.page.cats[0]["id"]

    await gallery.delete_cat(only)

    assert gallery.current_page == 1
    assert gallery.state is ViewState.READY
    assert gallery.page_info() is None


@pytest.mark.asyncio
async def test_server_error_shows_retry_message(gallery: GalleryClient, client, api: FakeApi):
    await client.login("alice", "secret1")
    api.fail_with = 500
    assert await gallery.refresh() is ViewState.ERROR
    assert "try again" in gallery.message


@pytest.mark.asyncio
async def test_toggle_adoption(gallery: GalleryClient, client):
    await client.login("alice", "secret1")
    adopted = await gallery.toggle_adoption(3)
    assert adopted == {"catId": 3, "count": 1, "userAdopted": True}
    released = await gallery.toggle_adoption(3)
    assert released["userAdopted"] is False


@pytest.mark.asyncio
async def test_logout_drops_token(gallery: GalleryClient, client):
    await client.login("alice", "secret1")
    await client.logout()
    assert client.token is None
    assert await gallery.refresh() is ViewState.LOGIN_REQUIRED
