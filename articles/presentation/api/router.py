"""Top-level API router aggregating all endpoint routers."""

from fastapi import APIRouter

from articles.presentation.api.endpoints.articles import router as articles_router
from articles.presentation.api.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
