"""Entry point for serving the Investor Shield API.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  uvicorn keeps the
logging set up by ``create_app`` instead of installing its own
handlers.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from investor_shield_api.app.core.config import settings
from investor_shield_api.app.main import app


async def main() -> None:
    config = Config(
        app=app, host=settings.host, port=settings.port, reload=False,
        log_level=settings.log_level.lower(), log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
