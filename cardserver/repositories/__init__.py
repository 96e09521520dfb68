"""
Persistence adapters.

Services depend on the repository interface rather than touching the
database session directly.
"""

from .card_repository import CardRepository

__all__ = ["CardRepository"]
