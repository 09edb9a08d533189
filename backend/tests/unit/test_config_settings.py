"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from cattery.config import Settings
from cattery.infrastructure.database.session import _get_async_url, _is_in_memory_sqlite
from cattery.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_gallery_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_page_size == 8
    assert settings.max_page_size == 100
    assert settings.placeholder_image == "default_placeholder.jpg"
    assert settings.image_fetch_timeout == 10.0
    assert settings.token_ttl_hours == 24


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://cats:cats@db/cattery")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "12")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql://cats:cats@db/cattery"
    assert settings.default_page_size == 12


def test_sync_urls_are_rewritten_to_async_drivers():
    assert _get_async_url("sqlite:///./cattery.db") == "sqlite+aiosqlite:///./cattery.db"
    assert _get_async_url("sqlite://") == "sqlite+aiosqlite://"
    assert _get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert _get_async_url("postgresql+asyncpg://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"


def test_in_memory_sqlite_detection():
    assert _is_in_memory_sqlite("sqlite+aiosqlite:///:memory:")
    assert _is_in_memory_sqlite("sqlite+aiosqlite://")
    assert not _is_in_memory_sqlite("sqlite+aiosqlite:///./cattery.db")


def test_setup_logging_applies_category_levels():
    settings = Settings(_env_file=None, log_level_sql="ERROR", log_level_images="DEBUG", log_level="bogus")
    setup_logging(settings)
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("cattery.infrastructure.images").level == logging.DEBUG
    # Unknown names fall back to INFO
    assert logging.getLogger().level == logging.INFO
