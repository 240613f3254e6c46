"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime

from articles.domain.exceptions import InvalidTitleError, TitleTooLongError

MAX_TITLE_LENGTH = 140


@dataclass(frozen=True)
class Article:
    """Core domain entity representing a published article.

    An unpersisted article has ``id == 0`` and no ``created_at``; both are
    assigned by the storage layer when the article is saved.
    """

    title: str
    id: int = 0
    created_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id > 0


def new_article(raw_title: str) -> Article:
    """Build an unpersisted article from raw user input.

    The title is trimmed once here; nothing downstream normalizes it again.
    """
    title = raw_title.strip()
    if not title:
        raise InvalidTitleError()
    if len(title) > MAX_TITLE_LENGTH:
        raise TitleTooLongError()
    return Article(title=title)
