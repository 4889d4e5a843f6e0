"""
FastAPI application for nginx-editor.

Runs on localhost only (127.0.0.1). Serves the formatter, tokenizer and theme
tables to the browser editor.
"""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nginx_editor import __version__
from nginx_editor.web.routes import editor, themes

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="nginx-editor",
        description="Formatting, tokenizing and theme API for the nginx configuration editor",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
    )

    # CORS - restrict to localhost only
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"http://(127\.0\.0\.1|localhost)(:\d+)?",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(editor.router, prefix="/api", tags=["editor"])
    app.include_router(themes.router, prefix="/api", tags=["themes"])

    @app.get("/api/health")
    async def health() -> dict[str, Any]:
        """Liveness probe."""
        return {"status": "ok", "version": __version__}

    return app


def run_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    """Run the FastAPI server with uvicorn.

    Args:
        host: Bind address. Anything other than 127.0.0.1 is replaced.
        port: Port to listen on.
    """
    import uvicorn

    if host != "127.0.0.1":
        logger.warning("Forcing bind to 127.0.0.1 (localhost only), ignoring %s", host)
        host = "127.0.0.1"

    logger.info("Starting nginx-editor API at http://%s:%s/api/docs", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_level="info")
