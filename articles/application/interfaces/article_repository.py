"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence, implemented in the infrastructure layer.

    Both operations are coroutines. Cancelling the awaiting task aborts the
    underlying store call; implementations must never leave a partial write.
    """

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Persist an unpersisted article and return it with id and created_at set.

        The input value is not modified.
        """
        ...

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article:
        """Retrieve a single article by its ID.

        Raises ArticleNotFoundError when no such article exists.
        """
        ...
