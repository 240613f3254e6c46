"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Length and emptiness are checked by the domain after trimming, so the
    field only has to be a string here. A missing or null title reads as
    empty and is rejected there.
    """

    title: str | None = Field("", examples=["Getting Started"])


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """Body of every non-2xx article response."""

    error: str
