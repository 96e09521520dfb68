"""
Configuration helpers for the card server.

Exposes a typed Settings object read from environment variables (port,
storage location, static front-end, CORS) so routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_PORT = 8765
DEFAULT_DB_FILE = "cards.db"
DEFAULT_STATIC_DIR = "public"
DEFAULT_MAX_BODY_BYTES = 1024 * 1024


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str = "dev"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    db_file: str = DEFAULT_DB_FILE
    database_url: str = ""
    static_dir: str = DEFAULT_STATIC_DIR
    cors_origins: tuple[str, ...] = ("*",)
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    log_level: str = "INFO"

    @property
    def storage_url(self) -> str:
        """SQLAlchemy URL for the card store; DATABASE_URL wins over DB_FILE."""
        url = (self.database_url or "").strip()
        if url:
            return url
        return f"sqlite:///{self.db_file}"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        db_file=os.getenv("DB_FILE") or str(Path.cwd() / DEFAULT_DB_FILE),
        database_url=os.getenv("DATABASE_URL", ""),
        static_dir=os.getenv("STATIC_DIR") or str(Path.cwd() / DEFAULT_STATIC_DIR),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        max_body_bytes=_int(os.getenv("MAX_BODY_BYTES"), DEFAULT_MAX_BODY_BYTES),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
