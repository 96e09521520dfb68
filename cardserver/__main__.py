"""Run the card server with uvicorn: ``python -m cardserver``."""
from __future__ import annotations

import logging

import uvicorn

from cardserver.app import create_app
from cardserver.core.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logging.getLogger(__name__).info("TCG card server listening on %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
