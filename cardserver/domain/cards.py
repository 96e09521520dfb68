"""Card record type and its mapping to/from the stored row."""
from __future__ import annotations

import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

TAG_DELIMITER = "|"
DEFAULT_COLOR = "Colorless"
DEFAULT_TYPE = "Unit"

INT_FIELDS = ("cost", "power", "health")
OPTIONAL_TEXT_FIELDS = ("dice", "flip_condition", "flip_text", "spell_speed")


@dataclass
class Card:
    id: str
    name: str
    text: str = ""
    tags: list[str] = field(default_factory=list)
    cost: Optional[int] = None
    power: Optional[int] = None
    health: Optional[int] = None
    color: str = DEFAULT_COLOR
    type: str = DEFAULT_TYPE
    dice: Optional[str] = None
    flip_condition: Optional[str] = None
    flip_text: Optional[str] = None
    spell_speed: Optional[str] = None
    updated: Optional[int] = None


def _base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if value <= 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(digits[rem])
    return "".join(reversed(out))


def generate_card_id(now_ms: int | None = None) -> str:
    """Return ``c_<base36 millis>_<random hex>``; 64 random bits per id."""
    stamp = int(time.time() * 1000) if now_ms is None else now_ms
    return f"c_{_base36(stamp)}_{secrets.token_hex(8)}"


def join_tags(tags: Iterable[str] | str | None) -> str:
    if tags is None:
        return ""
    if isinstance(tags, str):
        return tags
    return TAG_DELIMITER.join(str(tag) for tag in tags)


def split_tags(value: str | None) -> list[str]:
    if not value:
        return []
    return [tag for tag in value.split(TAG_DELIMITER) if tag]


def _int_or_none(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def to_row(card: Card) -> dict[str, Any]:
    """Flatten a card into column values for the ``cards`` table.

    Keys are the ``CardRow`` attribute names. Empty color/type fall back to
    the defaults and empty optional strings are stored as NULL.
    """
    row: dict[str, Any] = {
        "id": card.id,
        "name": card.name,
        "text": card.text or "",
        "tags": join_tags(card.tags),
        "color": card.color or DEFAULT_COLOR,
        "type": card.type or DEFAULT_TYPE,
        "updated": card.updated,
    }
    for name in INT_FIELDS:
        row[name] = _int_or_none(getattr(card, name))
    for name in OPTIONAL_TEXT_FIELDS:
        row[name] = getattr(card, name) or None
    return row


def from_row(row: Any) -> Card:
    """Rebuild a card from a stored row (ORM object or mapping).

    NULL text/color/type (rows written by other tools) read back as the defaults.
    """
    if isinstance(row, Mapping):
        get = row.get
    else:
        def get(key: str, default: Any = None) -> Any:
            return getattr(row, key, default)

    return Card(
        id=get("id"),
        name=get("name"),
        text=get("text") or "",
        tags=split_tags(get("tags")),
        cost=get("cost"),
        power=get("power"),
        health=get("health"),
        color=get("color") or DEFAULT_COLOR,
        type=get("type") or DEFAULT_TYPE,
        dice=get("dice"),
        flip_condition=get("flip_condition"),
        flip_text=get("flip_text"),
        spell_speed=get("spell_speed"),
        updated=get("updated"),
    )


def card_from_input(data: Mapping[str, Any], *, card_id: str, updated: int) -> Card:
    """Build a full card from client input, filling every omitted field.

    Nothing is carried over from a previously stored version.
    """
    return Card(
        id=card_id,
        name=data.get("name"),
        text=data.get("text") or "",
        tags=split_tags(join_tags(data.get("tags"))),
        cost=data.get("cost"),
        power=data.get("power"),
        health=data.get("health"),
        color=data.get("color") or DEFAULT_COLOR,
        type=data.get("type") or DEFAULT_TYPE,
        dice=data.get("dice") or None,
        flip_condition=data.get("flip_condition") or None,
        flip_text=data.get("flip_text") or None,
        spell_speed=data.get("spell_speed") or None,
        updated=updated,
    )
