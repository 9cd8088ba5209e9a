"""Entry point for the Museum Management API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Configuration (database path, manager credentials, bind address) is
read from environment variables; see ``museum_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from museum_api.app.core.config import settings
from museum_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port come from the ``HOST`` and ``PORT`` environment
    variables, defaulting to ``0.0.0.0`` and ``8000``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
