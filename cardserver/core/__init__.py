"""
Core utilities shared across the card server.

This package hosts configuration helpers (env vars, paths) and
cross-cutting concerns such as logging setup. Routers/services should
depend on these primitives instead of reading os.environ directly.
"""
