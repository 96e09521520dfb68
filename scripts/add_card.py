#!/usr/bin/env python3
"""
Add a single card straight to the configured store.

Usage:
  python scripts/add_card.py --name "Fireball" [--id c_fire] [--cost 3] [--tags "Spell|Fire"] ...
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garante que o pacote cardserver seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cardserver.core.config import get_settings  # noqa: E402
from cardserver.db.session import Database  # noqa: E402
from cardserver.repositories.card_repository import CardRepository  # noqa: E402
from cardserver.services.card_service import CardService  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add a card to the card store")
    ap.add_argument("--name", required=True, help="Card name")
    ap.add_argument("--id", help="Card id (default: generated)")
    ap.add_argument("--text", help="Rules text")
    ap.add_argument("--tags", help="Tags separated by '|' (ex.: Spell|Fire)")
    ap.add_argument("--cost", type=int)
    ap.add_argument("--power", type=int)
    ap.add_argument("--health", type=int)
    ap.add_argument("--color", help="Default: Colorless")
    ap.add_argument("--type", help="Default: Unit")
    ap.add_argument("--dice")
    ap.add_argument("--flip-condition", dest="flip_condition")
    ap.add_argument("--flip-text", dest="flip_text")
    ap.add_argument("--spell-speed", dest="spell_speed")
    ap.add_argument("--db", help="SQLAlchemy URL (default: from DB_FILE/DATABASE_URL)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing card with the same id")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    database = Database(args.db or get_settings().storage_url).open()
    try:
        repo = CardRepository(database)
        card_id = args.id or ""
        if card_id and repo.exists(card_id) and not args.force:
            raise SystemExit(f"Card '{card_id}' already exists (use --force to overwrite)")
        data = {key: value for key, value in vars(args).items() if key not in ("db", "force")}
        card = CardService(repo).create_card(data)
    finally:
        database.close()
    print("OK: card saved")
    print(f"  id: {card.id}")
    print(f"  name: {card.name}")
    if card.tags:
        print(f"  tags: {', '.join(card.tags)}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
