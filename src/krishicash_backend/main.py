"""KrishiCash API entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from krishicash_backend.api import create_api
from krishicash_backend.settings import get_settings

app = create_api()


def _configure_logging(level: str) -> None:
    """Route application loggers through a single root handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    _configure_logging(config.log_level)
    uvicorn.run(
        "krishicash_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_level=config.log_level,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
