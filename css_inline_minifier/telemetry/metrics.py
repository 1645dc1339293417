"""Prometheus metrics for minification runs."""

from prometheus_client import Counter, Histogram

documents_processed_total = Counter(
    'minifier_documents_processed_total',
    'Total number of HTML documents minified',
    ['source'],
)

stylesheet_bytes_total = Counter(
    'minifier_stylesheet_bytes_total',
    'Total stylesheet bytes seen, before and after minification',
    ['source', 'stage'],
)

minify_duration_seconds = Histogram(
    'minifier_duration_seconds',
    'Document minification duration in seconds',
    ['source'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
)

rejected_documents_total = Counter(
    'minifier_rejected_documents_total',
    'Total number of documents rejected before minification',
    ['reason'],
)


def record_document(source: str, result, duration: float) -> None:
    """Record one minified document.

    Args:
        source: Where the document came from ("api" or "batch")
        result: MinificationResult of the document
        duration: Processing time in seconds
    """
    documents_processed_total.labels(source=source).inc()
    stylesheet_bytes_total.labels(source=source, stage='original').inc(result.original_bytes)
    stylesheet_bytes_total.labels(source=source, stage='minified').inc(result.minified_bytes)
    minify_duration_seconds.labels(source=source).observe(duration)
