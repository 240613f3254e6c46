"""Concrete repository implementation backed by SQLAlchemy."""

import asyncio
import logging
from datetime import timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from articles.application.interfaces import ArticleRepository
from articles.domain.entities import Article
from articles.domain.exceptions import ArticleNotFoundError, PersistenceError
from articles.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)

DEFAULT_QUERY_TIMEOUT = 3.0


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Every call opens its own session from the factory and bounds the whole
    round-trip with ``query_timeout`` seconds. The bound nests inside any
    deadline the caller already carries, so the earlier one wins.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        query_timeout: float = DEFAULT_QUERY_TIMEOUT,
    ):
        self._session_factory = session_factory
        self._query_timeout = query_timeout

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        created_at = model.created_at
        # SQLite hands back naive timestamps; they are UTC
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Article(
            id=model.id,
            title=model.title,
            created_at=created_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(title=entity.title)

    async def save(self, article: Article) -> Article:
        # Driver errors raised while connecting (OSError and friends) bypass
        # SQLAlchemy, so everything is wrapped; CancelledError still propagates.
        try:
            async with asyncio.timeout(self._query_timeout):
                async with self._session_factory() as session:
                    async with session.begin():
                        model = self._to_model(article)
                        session.add(model)
                        await session.flush()
                        # id comes back from the flush, created_at from the server default
                        await session.refresh(model)
        except Exception as exc:
            raise PersistenceError("create article", exc) from exc

        created = self._to_entity(model)
        logger.debug("Created article id=%d", created.id)
        return created

    async def get_by_id(self, article_id: int) -> Article:
        try:
            async with asyncio.timeout(self._query_timeout):
                async with self._session_factory() as session:
                    model = await session.get(ArticleModel, article_id)
        except Exception as exc:
            raise PersistenceError(f"get article by id {article_id}", exc) from exc

        if model is None:
            raise ArticleNotFoundError(article_id)
        return self._to_entity(model)
