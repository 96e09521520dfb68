"""
Card request/response models.

Field names on the wire are camelCase (``flipCondition``, ``spellSpeed``);
Python attributes are snake_case. Unknown request fields are ignored.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from cardserver.domain.cards import Card


class CardIn(BaseModel):
    """Body for create/update. Every field is optional here; the service
    enforces ``name`` so a missing name maps to a 400 rather than a 422."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    text: Optional[str] = None
    tags: Union[List[str], str, None] = Field(
        default=None, description="List of tags, or a single '|'-delimited string"
    )
    cost: Optional[int] = None
    power: Optional[int] = None
    health: Optional[int] = None
    color: Optional[str] = None
    type: Optional[str] = None
    dice: Optional[str] = None
    flip_condition: Optional[str] = Field(default=None, alias="flipCondition")
    flip_text: Optional[str] = Field(default=None, alias="flipText")
    spell_speed: Optional[str] = Field(default=None, alias="spellSpeed")

    def to_input(self) -> dict:
        return self.model_dump(by_alias=False)


class CardOut(BaseModel):
    """A stored card as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    text: Optional[str] = ""
    tags: List[str] = Field(default_factory=list)
    cost: Optional[int] = None
    power: Optional[int] = None
    health: Optional[int] = None
    color: Optional[str] = None
    type: Optional[str] = None
    dice: Optional[str] = None
    flip_condition: Optional[str] = Field(default=None, alias="flipCondition")
    flip_text: Optional[str] = Field(default=None, alias="flipText")
    spell_speed: Optional[str] = Field(default=None, alias="spellSpeed")
    updated: Optional[int] = None

    @classmethod
    def from_card(cls, card: Card) -> "CardOut":
        return cls(**asdict(card))
