"""FastAPI service exposing the minifier."""

from css_inline_minifier.api.server import create_app

__all__ = ["create_app"]
