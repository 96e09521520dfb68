"""SQLAlchemy model for the stored card row."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Index, Integer, Text

from .session import Base


class CardRow(Base):
    """Flat row form of a card.

    Column names match the legacy ``cards`` table (camelCase for the flip
    and spell columns) so an existing database file stays readable.
    ``tags`` holds the ``|``-joined tag list.
    """

    __tablename__ = "cards"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    text = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)
    cost = Column(Integer, nullable=True)
    power = Column(Integer, nullable=True)
    health = Column(Integer, nullable=True)
    color = Column(Text, nullable=True)
    type = Column(Text, nullable=True)
    dice = Column(Text, nullable=True)
    flip_condition = Column("flipCondition", Text, nullable=True)
    flip_text = Column("flipText", Text, nullable=True)
    spell_speed = Column("spellSpeed", Text, nullable=True)
    updated = Column(BigInteger, nullable=True)

    __table_args__ = (Index("ix_cards_updated", "updated"),)
