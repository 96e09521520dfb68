"""Card record use cases (list, get, create, update, delete)."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

from cardserver.domain.cards import Card, card_from_input, generate_card_id
from cardserver.repositories.card_repository import CardRepository

logger = logging.getLogger(__name__)


class CardError(Exception):
    """Base exception for card workflow."""


class InvalidCardError(CardError):
    """Raised when the submitted record is unusable (missing name)."""


class CardNotFoundError(CardError):
    """Raised when no card exists for the requested id."""


class CardService:
    """Validates input, fills defaults, assigns ids/timestamps and writes through.

    Holds no state between calls besides the repository handle.
    """

    def __init__(self, repository: CardRepository) -> None:
        self.repository = repository

    def _now_ms(self) -> int:
        return int(time.time() * 1000)

    @staticmethod
    def _require_name(data: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        data = data or {}
        if not data.get("name"):
            raise InvalidCardError("Name required")
        return data

    def list_cards(self) -> list[Card]:
        cards = self.repository.list_recent()
        logger.debug("Listed %d cards", len(cards))
        return cards

    def get_card(self, card_id: str) -> Card:
        card = self.repository.get(card_id)
        if card is None:
            raise CardNotFoundError("Not found")
        return card

    def create_card(self, data: Optional[Mapping[str, Any]]) -> Card:
        data = self._require_name(data)
        now = self._now_ms()
        card_id = data.get("id") or generate_card_id(now)
        card = self.repository.upsert(card_from_input(data, card_id=card_id, updated=now))
        logger.info("Created card %s", card.id)
        return card

    def update_card(self, card_id: str, data: Optional[Mapping[str, Any]]) -> Card:
        data = self._require_name(data)
        card = self.repository.replace(card_from_input(data, card_id=card_id, updated=self._now_ms()))
        if card is None:
            raise CardNotFoundError("Not found")
        logger.info("Updated card %s", card.id)
        return card

    def delete_card(self, card_id: str) -> None:
        if not self.repository.delete(card_id):
            raise CardNotFoundError("Not found")
        logger.info("Deleted card %s", card_id)
