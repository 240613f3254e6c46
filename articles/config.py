from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Articles API"
    app_version: str = "0.1.0"
    app_env: str = "production"

    # Required, no default backing store
    database_url: str

    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # Timeouts (seconds) and limits
    query_timeout_seconds: float = 3.0
    health_check_timeout_seconds: float = 1.0
    shutdown_timeout_seconds: int = 5
    max_body_bytes: int = 1 << 20

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_requests: str = "INFO"         # articles.requests — failed API requests

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
