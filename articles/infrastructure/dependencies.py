"""FastAPI dependency injection: hands the wired application layer to endpoints."""

from fastapi import Request

from articles.application.services import ArticleService


def get_article_service(request: Request) -> ArticleService:
    """Provides the shared ArticleService wired up by the application factory."""
    return request.app.state.article_service
