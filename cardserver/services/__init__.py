"""
Use cases for the card server.

Routers (FastAPI endpoints) call these services instead of manipulating
the repository or the database session directly.
"""

from .card_service import CardError, CardNotFoundError, CardService, InvalidCardError

__all__ = ["CardError", "CardNotFoundError", "CardService", "InvalidCardError"]
