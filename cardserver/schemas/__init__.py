"""
Pydantic schemas for API payloads.

Kept apart from the ORM row and the domain dataclass so the wire format
(camelCase names, JSON arrays for tags) can evolve independently.
"""
