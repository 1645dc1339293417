"""FastAPI server exposing minification over HTTP."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from css_inline_minifier import __version__
from css_inline_minifier.config import Settings
from css_inline_minifier.api.routers import status_router, minify_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every request builds its own minifier session, so the app holds no
    alias state between requests.

    Args:
        settings: Application settings (read from the environment if omitted)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="CSS Inline Minifier",
        description="Class name reduction for HTML documents with embedded styles",
        version=__version__,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings or Settings()

    app.include_router(status_router.router)
    app.include_router(minify_router.router)

    logger.info("FastAPI application created (max document size: %d bytes)", app.state.settings.max_document_bytes)
    return app
