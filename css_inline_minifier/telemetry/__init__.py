"""Telemetry and monitoring module."""

from css_inline_minifier.telemetry.metrics import (
    documents_processed_total,
    stylesheet_bytes_total,
    minify_duration_seconds,
    rejected_documents_total,
    record_document,
)

__all__ = [
    "documents_processed_total",
    "stylesheet_bytes_total",
    "minify_duration_seconds",
    "rejected_documents_total",
    "record_document",
]
