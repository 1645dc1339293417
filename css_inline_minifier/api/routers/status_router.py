"""Status, health and metrics endpoints."""

import time

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from css_inline_minifier import __version__

router = APIRouter()


@router.get("/healthz")
async def healthz() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"ok": True, "status": "ok"})


@router.get("/health/live")
async def health_live() -> JSONResponse:
    """
    Liveness probe endpoint.
    Returns 200 if the application is running and responsive.
    """
    return JSONResponse(content={"status": "alive", "timestamp": time.time()})


@router.get("/api/status/version")
async def version(request: Request) -> JSONResponse:
    """Package version and the active alias configuration."""
    settings = request.app.state.settings
    return JSONResponse(
        content={
            "version": __version__,
            "alphabet_size": len(settings.alphabet),
            "extra_whitelist": settings.extra_whitelist,
        }
    )


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
