from __future__ import annotations

import re

from cardserver.domain.cards import (
    Card,
    card_from_input,
    from_row,
    generate_card_id,
    split_tags,
    to_row,
)


def test_round_trip_preserves_tag_order_and_drops_empty_segments():
    card = Card(id="c1", name="Fireball", tags=["Spell", "", "Fire", "Burn"], cost=3)

    row = to_row(card)
    assert row["tags"] == "Spell||Fire|Burn"

    back = from_row(row)
    assert back.tags == ["Spell", "Fire", "Burn"]
    assert back.cost == 3
    assert back.name == "Fireball"


def test_to_row_fills_defaults_and_nulls():
    row = to_row(Card(id="c2", name="Grunt", color="", type="", dice="", text=None, tags=[]))

    assert row["color"] == "Colorless"
    assert row["type"] == "Unit"
    assert row["text"] == ""
    assert row["tags"] == ""
    assert row["dice"] is None
    assert row["flip_condition"] is None
    assert row["cost"] is None and row["power"] is None and row["health"] is None


def test_from_row_keeps_absent_numbers_and_empty_tags():
    card = from_row({"id": "c3", "name": "Wall", "tags": None, "cost": None, "power": 0, "health": 5})

    assert card.tags == []
    assert card.cost is None
    assert card.power == 0
    assert card.health == 5


def test_defaults_are_sticky_after_round_trip():
    card = Card(id="c4", name="Elf", color=None, type=None)
    back = from_row(to_row(card))
    assert back.color == "Colorless"
    assert back.type == "Unit"
    assert from_row(to_row(back)) == back


def test_card_from_input_accepts_tag_string_and_ignores_prior_values():
    card = card_from_input(
        {"name": "Bolt", "tags": "Spell||Lightning|", "cost": 0, "spell_speed": ""},
        card_id="c5",
        updated=42,
    )

    assert card.tags == ["Spell", "Lightning"]
    assert card.cost == 0
    assert card.spell_speed is None
    assert card.updated == 42
    assert card.color == "Colorless"


def test_split_tags_handles_empty_values():
    assert split_tags("") == []
    assert split_tags(None) == []
    assert split_tags("|a||b|") == ["a", "b"]


def test_generated_ids_are_unique_and_time_prefixed():
    ids = {generate_card_id(1_700_000_000_000) for _ in range(500)}
    assert len(ids) == 500
    for card_id in ids:
        assert re.fullmatch(r"c_[0-9a-z]+_[0-9a-f]{16}", card_id)
