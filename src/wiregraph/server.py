from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from wiregraph.config import ServerProperties

logger = logging.getLogger(__name__)


class Server:
    """HTTP server built from the container.

    The constructor parameter is named ``config`` so the container resolves it
    from the ``ServerProperties`` instance registered under that name.
    """

    def __init__(self, config: ServerProperties) -> None:
        self.config = config
        self.app = self._build_app()

    def _build_app(self) -> FastAPI:
        app = FastAPI(title="wiregraph")
        port = self.config.http.port

        @app.get("/health")
        async def health() -> dict[str, object]:
            return {"status": "ok", "port": port}

        return app

    def run(self) -> None:
        """Serve the application until interrupted."""
        http = self.config.http
        logger.info("Starting server on %s:%s", http.host, http.port)
        uvicorn.run(self.app, host=http.host, port=http.port, log_config=None)


__all__ = ["Server"]
