"""Minification API endpoints."""

import asyncio
import logging
import time
from typing import List

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from css_inline_minifier.config import Settings
from css_inline_minifier.core import CssInlineMinifier, minify_documents
from css_inline_minifier.telemetry.metrics import record_document, rejected_documents_total


def _validate_whitelist(entries: List[str]) -> List[str]:
    cleaned = [entry.strip() for entry in entries]
    if any(not entry for entry in cleaned):
        raise ValueError("Whitelist entries cannot be empty or whitespace-only")
    return cleaned


class MinifyRequest(BaseModel):
    """Request body for single document minification."""

    html: str = Field(..., description="HTML document with embedded <style> blocks")
    whitelist: List[str] = Field(default_factory=list, description="Extra whitelist entries")

    @field_validator("whitelist")
    @classmethod
    def validate_whitelist(cls, v: List[str]) -> List[str]:
        return _validate_whitelist(v)


class BatchMinifyRequest(BaseModel):
    """Request body for minifying documents that share one alias table."""

    documents: List[str] = Field(..., min_length=1, description="HTML documents, in alias order")
    whitelist: List[str] = Field(default_factory=list, description="Extra whitelist entries")

    @field_validator("whitelist")
    @classmethod
    def validate_whitelist(cls, v: List[str]) -> List[str]:
        return _validate_whitelist(v)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/minify", tags=["minify"])


def _create_minifier(request: Request, whitelist: List[str]) -> CssInlineMinifier:
    """Create a fresh session configured from app settings."""
    settings: Settings = request.app.state.settings
    try:
        return CssInlineMinifier(alphabet=settings.alphabet, whitelist=[*settings.extra_whitelist, *whitelist])
    except ValueError as exc:
        logger.error("Invalid minifier configuration: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def _check_size(request: Request, documents: List[str]) -> None:
    settings: Settings = request.app.state.settings
    total = sum(len(document.encode("utf-8")) for document in documents)
    if total > settings.max_document_bytes:
        rejected_documents_total.labels(reason="too_large").inc()
        raise HTTPException(
            status_code=413,
            detail=f"Payload of {total} bytes exceeds limit of {settings.max_document_bytes} bytes",
        )


@router.post("")
async def minify(request: Request, body: MinifyRequest) -> JSONResponse:
    """
    Minify one HTML document.

    Returns the rewritten document, the stylesheet size totals and the alias
    map built from the document's markup.
    """
    _check_size(request, [body.html])
    minifier = _create_minifier(request, body.whitelist)

    started = time.time()
    result = await asyncio.to_thread(minifier.minify, body.html)
    record_document("api", result, time.time() - started)

    logger.info(
        "Minified document: %d -> %d CSS bytes, %d classes",
        result.original_bytes,
        result.minified_bytes,
        len(minifier.list_known_class_names()),
    )
    content = result.to_dict()
    content["aliases"] = minifier.aliases.items()
    return JSONResponse(content=content)


@router.post("/batch")
async def minify_batch(request: Request, body: BatchMinifyRequest) -> JSONResponse:
    """
    Minify several documents in one session.

    The markup of every document is processed before any stylesheet, so a
    selector is kept when its class appears in any of the documents.
    """
    _check_size(request, body.documents)
    minifier = _create_minifier(request, body.whitelist)

    started = time.time()
    results = await asyncio.to_thread(minify_documents, body.documents, minifier)
    duration = time.time() - started
    for result in results:
        record_document("api", result, duration / len(results))

    logger.info("Minified batch of %d documents", len(results))
    return JSONResponse(
        content={
            "documents": [result.to_dict() for result in results],
            "aliases": minifier.aliases.items(),
            "total": len(results),
        }
    )
