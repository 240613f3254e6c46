"""Domain-specific exceptions — framework-independent."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure conditions the article pipeline can report."""

    INVALID_TITLE = "invalid_title"
    TITLE_TOO_LONG = "title_too_long"
    INVALID_ID = "invalid_id"
    ARTICLE_NOT_FOUND = "article_not_found"
    PERSISTENCE = "persistence"


class ArticleError(Exception):
    """Base class for every error raised by the article pipeline.

    ``kind`` identifies the condition; ``message`` is the human-readable
    description and ``cause`` the wrapped lower-level error, if any.
    """

    kind: ErrorKind
    default_message: str = ""

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class InvalidTitleError(ArticleError):
    """Raised when a title is empty after trimming."""

    kind = ErrorKind.INVALID_TITLE
    default_message = "title is required"


class TitleTooLongError(ArticleError):
    """Raised when a trimmed title exceeds the maximum length."""

    kind = ErrorKind.TITLE_TOO_LONG
    default_message = "title must be at most 140 characters"


class InvalidIDError(ArticleError):
    """Raised when an article id is not a positive integer."""

    kind = ErrorKind.INVALID_ID
    default_message = "id must be a positive integer"


class ArticleNotFoundError(ArticleError):
    """Raised when a requested article does not exist."""

    kind = ErrorKind.ARTICLE_NOT_FOUND
    default_message = "article not found"

    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__()


class PersistenceError(ArticleError):
    """Raised when the backing store fails for any reason other than not-found.

    The message names the failed operation and is meant for operators only;
    it is never returned to API callers.
    """

    kind = ErrorKind.PERSISTENCE

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        detail = str(cause) or type(cause).__name__
        super().__init__(f"{operation}: {detail}", cause=cause)
