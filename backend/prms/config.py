import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Property & Rent Management API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Persisted key-value storage (SQLAlchemy URL). Empty → in-memory only.
    storage_url: str = "sqlite:///data/prms.db"

    # The two accepted credential pairs
    admin_username: str = "admin"
    admin_password: str = "772012"
    employee_username: str = "employee"
    employee_password: str = "123"

    # Activity log retention; None keeps every entry
    max_notifications: int | None = None

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL statements
    log_level_api: str = "INFO"              # prms.presentation + dependencies
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # session + domain store mutations

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @field_validator("max_notifications")
    @classmethod
    def _unbounded_when_not_positive(cls, value: int | None) -> int | None:
        """A non-positive retention limit means keep everything."""
        if value is not None and value < 1:
            _config_logger.warning(
                "Ignoring max_notifications=%s; keeping full activity history", value
            )
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
