"""Top-level API router: every endpoint lives under /api."""

from fastapi import APIRouter

from cattery.presentation.api.endpoints.health import router as health_router
from cattery.presentation.api.endpoints.cats import router as cats_router
from cattery.presentation.api.endpoints.cats import tags_router
from cattery.presentation.api.endpoints.auth import router as auth_router
from cattery.presentation.api.endpoints.adoptions import router as adoptions_router
from cattery.presentation.api.endpoints.contact import router as contact_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(cats_router)
router.include_router(tags_router)
router.include_router(auth_router)
router.include_router(adoptions_router)
router.include_router(contact_router)
