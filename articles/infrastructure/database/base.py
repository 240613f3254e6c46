"""SQLAlchemy declarative base; its metadata drives table creation."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
