"""Centralized logging configuration.

Every logger the service cares about belongs to a category whose level
comes from Settings:

    log_level           root, and every ``articles.*`` module logger
    log_level_sql       SQLAlchemy engine/pool and the database drivers
    log_level_uvicorn   uvicorn server and access logs
    log_level_requests  ``articles.requests``, one line per failed API request

Usage:
    from articles.infrastructure.logging import setup_logging
    setup_logging(settings)   # Call once at startup (in the lifespan)
"""

import logging
import sys

from articles.config import Settings

REQUEST_LOGGER = "articles.requests"

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_requests": (REQUEST_LOGGER,),
}


def setup_logging(settings: Settings) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name."""
    applied: dict[str, int] = {}

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; tests and scripts may have none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    applied["root"] = root.level

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug("Log levels applied: %s", applied)
    return applied


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
