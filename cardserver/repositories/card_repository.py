"""Card storage backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select, update

from cardserver.db.models import CardRow
from cardserver.db.session import Database
from cardserver.domain.cards import Card, from_row, to_row


class CardRepository:
    """Upsert, point lookup, ordered scan, replace and delete by id.

    Each call opens its own session; nothing is cached between calls.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    def get(self, card_id: str) -> Optional[Card]:
        with self.database.session() as session:
            row = session.get(CardRow, card_id)
            return from_row(row) if row else None

    def list_recent(self) -> list[Card]:
        with self.database.session() as session:
            stmt = select(CardRow).order_by(CardRow.updated.desc())
            return [from_row(row) for row in session.execute(stmt).scalars().all()]

    def upsert(self, card: Card) -> Card:
        with self.database.session() as session:
            row = session.merge(CardRow(**to_row(card)))
            session.commit()
            return from_row(row)

    def replace(self, card: Card) -> Optional[Card]:
        """Overwrite every column of an existing row; None if the id is unknown."""
        values = to_row(card)
        card_id = values.pop("id")
        with self.database.session() as session:
            stmt = (
                update(CardRow)
                .where(CardRow.id == card_id)
                .values({getattr(CardRow, key): value for key, value in values.items()})
            )
            result = session.execute(stmt)
            session.commit()
            if not result.rowcount:
                return None
            row = session.get(CardRow, card_id)
            return from_row(row) if row else None

    def delete(self, card_id: str) -> bool:
        with self.database.session() as session:
            result = session.execute(delete(CardRow).where(CardRow.id == card_id))
            session.commit()
            return bool(result.rowcount)

    def exists(self, card_id: str) -> bool:
        with self.database.session() as session:
            stmt = select(CardRow.id).where(CardRow.id == card_id).limit(1)
            return session.execute(stmt).first() is not None
