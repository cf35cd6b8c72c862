"""Entry point for the Booking Registry API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``Settings`` (defaults ``0.0.0.0`` and ``3000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from booking_registry_api.app.core.config import settings
from booking_registry_api.app.core.logging_config import uvicorn_log_config
from booking_registry_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=uvicorn_log_config(settings.log_level),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
