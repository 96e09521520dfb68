from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote cardserver seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cardserver.app import create_app  # noqa: E402
from cardserver.core.config import Settings  # noqa: E402
from cardserver.db.session import Database  # noqa: E402
from cardserver.repositories.card_repository import CardRepository  # noqa: E402
from cardserver.services.card_service import CardService  # noqa: E402


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cards.db'}"


@pytest.fixture()
def database(db_url):
    """Temporary SQLite store, disposed at teardown so the file is not left locked."""
    db = Database(db_url).open()
    yield db
    db.close()


@pytest.fixture()
def repo(database):
    return CardRepository(database)


@pytest.fixture()
def clock(monkeypatch):
    """Strictly increasing fake epoch millis for CardService."""
    ticks = itertools.count(1_700_000_000_000, 1000)
    monkeypatch.setattr(CardService, "_now_ms", lambda self: next(ticks))
    return ticks


@pytest.fixture()
def service(repo, clock):
    return CardService(repo)


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        db_file=str(tmp_path / "api.db"),
        static_dir=str(tmp_path / "public"),
        max_body_bytes=4096,
    )


@pytest.fixture()
def client(settings, clock):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
