"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cattery.config import Settings, get_settings
from cattery.infrastructure.database import Database
from cattery.infrastructure.images import CataasImageResolver
from cattery.infrastructure.logging.log_config import setup_logging
from cattery.infrastructure.security import BcryptPasswordHasher
from cattery.presentation.api.error_handlers import register_exception_handlers
from cattery.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, create tables, release the engine."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    database: Database = app.state.database
    await database.create_all()
    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    # Shutdown
    await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Collaborators with a lifetime longer than a request are created here
    and kept on ``app.state``; tests pass their own ``Settings`` or replace
    those attributes before issuing requests.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.sql_echo)
    app.state.image_resolver = CataasImageResolver(
        settings.cataas_base_url,
        timeout=settings.image_fetch_timeout,
    )
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cattery.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
