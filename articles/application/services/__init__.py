
from .article_service import ArticleService

__all__ = [
    "ArticleService",
]
