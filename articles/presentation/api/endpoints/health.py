"""Health check endpoint: pings the backing store with a short deadline."""

import asyncio
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["Health"])

logger = logging.getLogger(__name__)

DEFAULT_HEALTH_CHECK_TIMEOUT = 1.0


@router.get("/healthz")
async def health_check(request: Request) -> JSONResponse:
    """Returns 200 when the store answers in time, 503 otherwise.

    Without a configured callback the service is reported healthy.
    """
    check = getattr(request.app.state, "health_check", None)
    if check is None:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ok"})

    timeout = getattr(request.app.state, "health_check_timeout", DEFAULT_HEALTH_CHECK_TIMEOUT)
    try:
        async with asyncio.timeout(timeout):
            await check()
    except TimeoutError:
        return _degraded(f"health check timed out after {timeout:g}s")
    except Exception as exc:
        return _degraded(str(exc) or type(exc).__name__)

    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ok"})


def _degraded(db_error: str) -> JSONResponse:
    logger.warning("Health check failed: %s", db_error)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "degraded", "db_error": db_error},
    )
