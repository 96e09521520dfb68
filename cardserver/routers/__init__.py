"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter that the application factory includes,
keeping endpoint definitions close to their use cases.
"""
