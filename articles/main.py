"""FastAPI application factory and process entry point."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from articles.application.services import ArticleService
from articles.config import Settings, get_settings
from articles.infrastructure.database import (
    HealthCheck,
    build_engine,
    build_session_factory,
    create_tables,
    make_ping,
)
from articles.infrastructure.database.repositories import SQLAlchemyArticleRepository
from articles.infrastructure.logging import setup_logging
from articles.presentation.api.endpoints.health import DEFAULT_HEALTH_CHECK_TIMEOUT
from articles.presentation.api.router import router as api_router
from articles.presentation.errors import register_exception_handlers
from articles.presentation.middleware import DEFAULT_MAX_BODY_BYTES, BodySizeLimitMiddleware

logger = logging.getLogger(__name__)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def create_app(
    article_service: ArticleService,
    health_check: HealthCheck | None = None,
    *,
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
    health_check_timeout: float = DEFAULT_HEALTH_CHECK_TIMEOUT,
    title: str = "Articles API",
    version: str = "0.1.0",
    lifespan: Lifespan | None = None,
) -> FastAPI:
    """Build the HTTP surface around an already wired ArticleService.

    ``health_check`` is awaited by ``GET /healthz``; leave it as None when no
    backing store is attached and the endpoint will always report healthy.
    """
    app = FastAPI(title=title, version=version, lifespan=lifespan)

    app.state.article_service = article_service
    app.state.health_check = health_check
    app.state.health_check_timeout = health_check_timeout

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=max_body_bytes)
    register_exception_handlers(app)

    app.include_router(api_router)

    return app


def build_app(settings: Settings | None = None) -> FastAPI:
    """Wire engine → repository → service → HTTP app from settings."""
    settings = settings or get_settings()

    engine = build_engine(settings.database_url, echo=(settings.app_env == "development"))
    session_factory = build_session_factory(engine)
    repository = SQLAlchemyArticleRepository(
        session_factory,
        query_timeout=settings.query_timeout_seconds,
    )
    ping = make_ping(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan: verify the database, create tables, dispose the pool."""
        setup_logging(settings)

        try:
            await ping()
        except Exception:
            logger.exception("Database is unreachable")
            await engine.dispose()
            raise

        await create_tables(engine)
        logger.info("%s %s started (env=%s)", settings.app_title, settings.app_version, settings.app_env)

        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database connections closed")

    return create_app(
        ArticleService(repository),
        ping,
        max_body_bytes=settings.max_body_bytes,
        health_check_timeout=settings.health_check_timeout_seconds,
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )


def run() -> None:
    """Console entry point. Serve until SIGINT/SIGTERM, then drain within the grace period."""
    import uvicorn

    try:
        settings = get_settings()
    except ValidationError as exc:
        raise SystemExit(f"invalid configuration: {exc}") from exc

    uvicorn.run(
        "articles.main:build_app",
        factory=True,
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level_uvicorn.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    run()
