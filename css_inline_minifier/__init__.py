"""
CSS Inline Minifier - class name reduction for HTML documents with embedded styles.

This package provides:
- A minifier session that renames classes in markup and ``<style>`` blocks
- Removal of selectors never referenced by the markup
- Batch processing of several HTML files sharing one alias table
- A command-line tool and a FastAPI service around the same session
"""

from css_inline_minifier.core import CssInlineMinifier, MinificationResult

__version__ = "0.1.0"

__all__ = ["CssInlineMinifier", "MinificationResult", "__version__"]
