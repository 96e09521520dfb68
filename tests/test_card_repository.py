"""
Smoke tests for CardRepository against a temporary SQLite database.
"""
from __future__ import annotations

from sqlalchemy import text

from cardserver.domain.cards import Card


def test_upsert_get_and_delete(repo):
    repo.upsert(Card(id="uid1", name="Knight", tags=["Unit", "Human"], cost=2, updated=10))

    card = repo.get("uid1")
    assert card is not None
    assert card.tags == ["Unit", "Human"]
    assert card.color == "Colorless"
    assert repo.exists("uid1")

    assert repo.delete("uid1") is True
    assert repo.get("uid1") is None
    assert repo.delete("uid1") is False


def test_upsert_overwrites_existing_id(repo):
    repo.upsert(Card(id="uid2", name="Old", dice="d6", updated=1))
    repo.upsert(Card(id="uid2", name="New", updated=2))

    card = repo.get("uid2")
    assert card.name == "New"
    assert card.dice is None
    assert len(repo.list_recent()) == 1


def test_replace_reports_missing_row(repo):
    assert repo.replace(Card(id="ghost", name="Ghost", updated=5)) is None
    assert repo.get("ghost") is None


def test_replace_overwrites_every_column(repo):
    repo.upsert(Card(id="uid3", name="Mage", dice="d20", tags=["Caster"], cost=4, updated=1))

    card = repo.replace(Card(id="uid3", name="Archmage", updated=2))

    assert card.name == "Archmage"
    assert card.dice is None
    assert card.tags == []
    assert card.cost is None
    assert card.updated == 2


def test_list_recent_orders_by_updated_desc(repo):
    repo.upsert(Card(id="a", name="A", updated=100))
    repo.upsert(Card(id="b", name="B", updated=300))
    repo.upsert(Card(id="c", name="C", updated=200))

    assert [card.id for card in repo.list_recent()] == ["b", "c", "a"]


def test_columns_match_legacy_schema(database, repo):
    repo.upsert(Card(id="uid4", name="Flip", flip_condition="On death", flip_text="Rise", spell_speed="Fast", updated=1))

    with database.engine.connect() as conn:
        row = conn.execute(
            text('SELECT "flipCondition", "flipText", "spellSpeed", tags FROM cards WHERE id = :id'),
            {"id": "uid4"},
        ).one()
        mode = conn.execute(text("PRAGMA journal_mode")).scalar()

    assert tuple(row) == ("On death", "Rise", "Fast", "")
    assert mode.lower() == "wal"


def test_create_tables_cli_helper(tmp_path):
    from sqlalchemy import create_engine, inspect

    from cardserver.db.create_tables import create_all

    url = f"sqlite:///{tmp_path / 'fresh.db'}"
    create_all(url)

    engine = create_engine(url)
    try:
        columns = {col["name"] for col in inspect(engine).get_columns("cards")}
    finally:
        engine.dispose()
    assert {"id", "name", "tags", "flipCondition", "flipText", "spellSpeed", "updated"} <= columns


def test_rows_written_elsewhere_read_back_with_defaults(database, repo):
    with database.engine.begin() as conn:
        conn.execute(text("INSERT INTO cards (id, name, updated) VALUES ('legacy', 'Old Card', 5)"))

    card = repo.get("legacy")
    assert card.text == ""
    assert card.color == "Colorless"
    assert card.type == "Unit"
    assert card.tags == []
    assert card.cost is None
