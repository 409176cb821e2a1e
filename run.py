"""Entry point for serving the Album Store API.

Starts the FastAPI application with Uvicorn on the host and port from
the application settings (``HOST`` and ``PORT`` environment variables,
``localhost`` and ``8080`` by default).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from album_store_api.app.core.config import settings
from album_store_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
