"""Engine/session lifecycle for the card store."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_wal(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


class Database:
    """Owns the SQLAlchemy engine for one storage location.

    Built explicitly by the application factory: ``open()`` on startup,
    ``close()`` on shutdown. Safe to share between concurrent requests;
    every unit of work gets its own session.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Database":
        if self._engine is not None:
            return self
        is_sqlite = self.url.startswith("sqlite")
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        engine = create_engine(self.url, future=True, pool_pre_ping=True, connect_args=connect_args)
        if is_sqlite:
            event.listen(engine, "connect", _enable_wal)
        self._engine = engine
        self._sessionmaker = sessionmaker(
            bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True
        )
        # ensure models are imported for metadata
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=engine)
        logger.info("Card store opened at %s", engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Card store closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()
