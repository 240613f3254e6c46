"""Application service (use case) for Article operations."""

from articles.application.interfaces import ArticleRepository
from articles.domain.entities import Article, new_article
from articles.domain.exceptions import InvalidIDError


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Holds no per-request state, so one instance is shared by all requests.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def create_article(self, raw_title: str) -> Article:
        article = new_article(raw_title)
        return await self._repository.save(article)

    async def get_article(self, article_id: int) -> Article:
        if article_id <= 0:
            raise InvalidIDError()
        return await self._repository.get_by_id(article_id)
