"""Server-run contract: serve the router app until shutdown."""

from __future__ import annotations

import logging

import uvicorn

from ..errors import ServerFailureError
from ..state import ServingConfig, ResolvedTokenizer
from ..backends.base import Backend
from .app import create_app

logger = logging.getLogger(__name__)


async def run_server(backend: Backend, config: ServingConfig, tokenizer: ResolvedTokenizer) -> None:
    """Serve on ``config.hostname:config.port`` until the server exits.

    Raises:
        ServerFailureError: The server could not start or exited abnormally.
    """
    app = create_app(backend, config, tokenizer)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.hostname,
            port=config.port,
            log_config=None,
        )
    )
    logger.info("server: listening on %s:%d", config.hostname, config.port)
    try:
        await server.serve()
    except SystemExit as exc:
        # uvicorn exits the process when it cannot bind
        raise ServerFailureError(f"server exited during startup (code={exc.code})") from exc
    if not server.started:
        raise ServerFailureError(f"server failed to start on {config.hostname}:{config.port}")
    logger.info("server: stopped")


__all__ = ["run_server"]
