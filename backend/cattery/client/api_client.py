"""Async HTTP client for the Cattery API.

Wraps every ``/api`` endpoint with httpx. After a successful login the
bearer token is kept on the client and sent with each request; logout
drops it again. Non-2xx responses raise ``ApiError`` carrying the
``{"error": ...}`` message from the body.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class CatteryApiClient:
    """Thin async wrapper over the REST endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self.token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                f"{self._base_url}/api{path}",
                headers=self._get_headers(),
                json=json,
                params=params,
            )
            if not response.is_success:
                self._raise_api_error(response)
            return response.json()
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> None:
        try:
            message = response.json().get("error") or response.reason_phrase
        except ValueError:
            message = response.text or response.reason_phrase
        logger.debug("API %s %s -> %d: %s", response.request.method, response.request.url, response.status_code, message)
        raise ApiError(response.status_code, message)

    # ── Auth ────────────────────────────────────────────────────────────

    async def register(self, username: str, password: str, email: str | None = None) -> dict:
        payload = {"username": username, "password": password}
        if email:
            payload["email"] = email
        return await self._request("POST", "/auth/register", json=payload)

    async def login(self, username: str, password: str) -> dict:
        data = await self._request(
            "POST", "/auth/login", json={"username": username, "password": password}
        )
        self.token = data["token"]
        return data

    async def logout(self) -> None:
        try:
            await self._request("POST", "/auth/logout")
        finally:
            self.token = None

    async def auth_status(self) -> dict:
        return await self._request("GET", "/auth/status")

    # ── Cats ────────────────────────────────────────────────────────────

    async def list_cats(
        self,
        *,
        page: int = 1,
        limit: int = 8,
        search: str = "",
        tag_filter: str = "",
    ) -> dict:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        if tag_filter:
            params["tagFilter"] = tag_filter
        return await self._request("GET", "/cats", params=params)

    async def get_cat(self, cat_id: int) -> dict:
        return await self._request("GET", f"/cats/{cat_id}")

    async def list_tags(self) -> list[str]:
        data = await self._request("GET", "/tags")
        return data["tags"]

    async def create_cat(self, data: dict) -> dict:
        return await self._request("POST", "/cats", json=data)

    async def update_cat(self, cat_id: int, data: dict) -> dict:
        return await self._request("PUT", f"/cats/{cat_id}", json=data)

    async def delete_cat(self, cat_id: int) -> dict:
        return await self._request("DELETE", f"/cats/{cat_id}")

    # ── Adoptions ───────────────────────────────────────────────────────

    async def adopt(self, cat_id: int) -> dict:
        return await self._request("POST", "/adoptions", json={"cat_id": cat_id})

    async def unadopt(self, cat_id: int) -> dict:
        return await self._request("DELETE", f"/adoptions/{cat_id}")

    async def list_adoptions(self) -> list[dict]:
        data = await self._request("GET", "/adoptions")
        return data["adoptions"]

    async def adoption_status(self, cat_id: int) -> dict:
        return await self._request("GET", f"/adoptions/cat/{cat_id}")

    # ── Contact ─────────────────────────────────────────────────────────

    async def send_contact(
        self, name: str, email: str, message: str, subject: str | None = None
    ) -> dict:
        payload = {"name": name, "email": email, "message": message}
        if subject:
            payload["subject"] = subject
        return await self._request("POST", "/contact", json=payload)
