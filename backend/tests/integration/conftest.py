"""Shared fixtures for API tests against an in-memory SQLite database."""

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cattery.application.interfaces import ImageResolver
from cattery.config import Settings
from cattery.main import create_app

FAKE_IMAGE_URL = "https://cataas.com/cat/test-image"


class StubImageResolver(ImageResolver):
    def __init__(self, url: str | None = FAKE_IMAGE_URL):
        self.url = url

    async def resolve_image_url(self) -> str | None:
        return self.url


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        bcrypt_rounds=4,
        app_env="test",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    # ASGITransport does not run the lifespan, so tables are created here
    application = create_app(settings)
    application.state.image_resolver = StubImageResolver()
    await application.state.database.create_all()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.fixture
def login(client: AsyncClient) -> Callable[[str], Awaitable[dict[str, str]]]:
    """Register ``username`` (password ``secret1``) and return auth headers."""

    async def _login(username: str, password: str = "secret1") -> dict[str, str]:
        await client.post("/api/auth/register", json={"username": username, "password": password})
        response = await client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
