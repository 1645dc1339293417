"""Configuration module."""

from css_inline_minifier.config.settings import Settings

__all__ = ["Settings"]
