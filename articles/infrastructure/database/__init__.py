from .base import Base
from .session import (
    HealthCheck,
    build_engine,
    build_session_factory,
    create_tables,
    make_ping,
)
from .models import ArticleModel

__all__ = [
    "Base",
    "HealthCheck",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "make_ping",
    "ArticleModel",
]
