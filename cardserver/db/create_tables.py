"""Utility script to create the card table at the configured location."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from cardserver.core.config import get_settings
from .session import Database


def create_all(url: str | None = None) -> None:
    database = Database(url or get_settings().storage_url)
    try:
        database.open()
    finally:
        database.close()


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
