from .article import MAX_TITLE_LENGTH, Article, new_article

__all__ = [
    "Article",
    "MAX_TITLE_LENGTH",
    "new_article",
]
