#!/usr/bin/env python3
"""Bulk import: JSON array of cards (API field names) -> card store."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Garante que o pacote cardserver seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError  # noqa: E402

from cardserver.core.config import get_settings  # noqa: E402
from cardserver.db.session import Database  # noqa: E402
from cardserver.repositories.card_repository import CardRepository  # noqa: E402
from cardserver.schemas.card import CardIn  # noqa: E402
from cardserver.services.card_service import CardService, InvalidCardError  # noqa: E402


def _load_json(path: Path) -> list:
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("cards", [])
    if not isinstance(data, list):
        raise SystemExit("Expected a JSON array of cards")
    return data


def import_cards(entries: list, service: CardService) -> tuple[int, int]:
    """Create every entry; returns (imported, skipped)."""
    imported = skipped = 0
    for index, entry in enumerate(entries):
        try:
            service.create_card(CardIn.model_validate(entry).to_input())
        except (InvalidCardError, ValidationError) as exc:
            print(f"[skip] entry {index}: {exc}")
            skipped += 1
            continue
        imported += 1
    return imported, skipped


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Import cards from a JSON file")
    ap.add_argument("path", type=Path, help="JSON file with an array of cards")
    ap.add_argument("--db", help="SQLAlchemy URL (default: from DB_FILE/DATABASE_URL)")
    args = ap.parse_args(argv)

    entries = _load_json(args.path)
    database = Database(args.db or get_settings().storage_url).open()
    try:
        imported, skipped = import_cards(entries, CardService(CardRepository(database)))
    finally:
        database.close()
    print(f"Imported {imported} card(s), skipped {skipped}.")


if __name__ == "__main__":
    main()
