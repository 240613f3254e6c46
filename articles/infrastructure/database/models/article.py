"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from articles.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table."""

    __tablename__ = "articles"

    # SQLite only auto-increments INTEGER PRIMARY KEY columns
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"
