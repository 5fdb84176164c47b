"""Entry point for the Address Book API.

Launches the FastAPI application with Uvicorn.  Host and port are read
from the ``HTTP_HOST`` and ``HTTP_PORT`` environment variables, which
default to ``0.0.0.0`` and ``8080``.  Uvicorn writes through the
application's logging setup.  MongoDB settings are described in
``address_book_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from address_book_api.app.core.config import settings
from address_book_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.http_host,
        port=settings.http_port,
        reload=False,
        log_level=settings.log_level.lower(),
        # logging is configured by create_app
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
