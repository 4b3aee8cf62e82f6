"""Entry point for the Pitch Planner API.

Starts the FastAPI application with Uvicorn.  Host, port and the
reload flag are read from the environment variables ``API_HOST``,
``API_PORT`` and ``API_RELOAD``; other settings (database path, log
level, secret key) are read by ``pitch_planner_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

import uvicorn
from uvicorn import Config, Server

APP = "pitch_planner_api.app.main:app"


def _host() -> str:
    return os.getenv("API_HOST", "0.0.0.0")


def _port() -> int:
    return int(os.getenv("API_PORT", "8000"))


def reload_enabled() -> bool:
    return os.getenv("API_RELOAD", "false").lower() in {"1", "true", "yes"}


async def run_api() -> None:
    """Serve the API in the current event loop until interrupted."""
    config = Config(app=APP, host=_host(), port=_port(), log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    # Auto-reload needs uvicorn's supervisor process, which only
    # ``uvicorn.run`` starts.
    if reload_enabled():
        uvicorn.run(APP, host=_host(), port=_port(), reload=True, log_level="info")
        return
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
