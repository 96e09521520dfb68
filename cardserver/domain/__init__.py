"""Domain types and pure helpers (no storage, no HTTP)."""

from .cards import Card, from_row, generate_card_id, to_row

__all__ = ["Card", "from_row", "generate_card_id", "to_row"]
