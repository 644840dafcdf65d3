"""Entry point for serving the Person CRUD API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``8000``); see ``person_crud_api/app/core/config.py`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from person_crud_api.app.core.config import settings
from person_crud_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Logging is already configured by create_app; uvicorn records
        # propagate to those handlers at the levels set there.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
