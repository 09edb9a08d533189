from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Cattery API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./cattery.db"
    sql_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Gallery paging
    default_page_size: int = 8
    max_page_size: int = 100

    # External cat image service
    cataas_base_url: str = "https://cataas.com"
    image_fetch_timeout: float = 10.0
    placeholder_image: str = "default_placeholder.jpg"

    # Authentication
    token_ttl_hours: int = 24
    bcrypt_rounds: int = 12

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_images: str = "INFO"           # cataas image resolver

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
