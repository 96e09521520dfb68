"""TCG card record server: CRUD over a single ``cards`` table."""

__version__ = "1.0.0"
