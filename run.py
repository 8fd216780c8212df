"""Entry point for the Certificate Registry API.

Starts the FastAPI application under Uvicorn.  Host, port and the other
settings are read from environment variables (see
``certificate_api/app/core/config.py``); by default the service listens
on ``0.0.0.0:8080``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from certificate_api.app.core.config import settings


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="certificate_api.app.main:app",
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
    except KeyboardInterrupt:
        pass
