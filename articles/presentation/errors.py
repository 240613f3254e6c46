"""Exception handlers: the single place where errors become HTTP responses.

Validation and not-found errors carry messages that are safe to show to
callers. Everything else is logged with its full detail and rendered as a
generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from articles.domain.exceptions import ArticleError, ErrorKind
from articles.infrastructure.logging.log_config import REQUEST_LOGGER
from articles.presentation.middleware import RequestBodyTooLargeError

logger = logging.getLogger(REQUEST_LOGGER)

INVALID_BODY_MESSAGE = "invalid request body"
INTERNAL_ERROR_MESSAGE = "internal server error"

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_TITLE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TITLE_TOO_LONG: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ARTICLE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def article_error_handler(request: Request, exc: ArticleError) -> JSONResponse:
    """Map domain errors to 4xx; persistence errors fall through to a 500."""
    status_code = _STATUS_BY_KIND.get(exc.kind)
    if status_code is None:
        return await internal_error_handler(request, exc)
    logger.info("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Decoder details stay out of the response
    logger.info("%s %s rejected body: %s", request.method, request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def body_too_large_handler(request: Request, exc: RequestBodyTooLargeError) -> JSONResponse:
    logger.info("%s %s rejected body over %d bytes", request.method, request.url.path, exc.max_body_bytes)
    return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-raised HTTP errors in the ``{"error": ...}`` shape.

    A 400 from the framework means the body could not be read (bad encoding
    and the like); its detail is replaced like any other decode failure.
    """
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        logger.info("%s %s unreadable body: %s", request.method, request.url.path, exc.detail)
        return _error(exc.status_code, INVALID_BODY_MESSAGE, exc.headers)
    return _error(exc.status_code, str(exc.detail), exc.headers)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ArticleError, article_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RequestBodyTooLargeError, body_too_large_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, internal_error_handler)
