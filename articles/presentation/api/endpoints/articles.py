"""Article create/read endpoints."""

import re

from fastapi import APIRouter, Depends, status

from articles.application.schemas import ArticleCreate, ArticleResponse, ErrorResponse
from articles.application.services import ArticleService
from articles.domain.exceptions import InvalidIDError
from articles.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/article", tags=["Articles"])

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


def parse_article_id(raw: str) -> int:
    """Parse a path segment as a base-10 signed 64-bit integer.

    Zero and negative values parse fine here; the service rejects them.
    """
    if not _DECIMAL_ID.fullmatch(raw):
        raise InvalidIDError()
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidIDError()
    return value


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data.title or "")
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    article = await service.get_article(parse_article_id(article_id))
    return ArticleResponse.model_validate(article, from_attributes=True)
