"""Core minification logic: aliasing, markup and stylesheet rewriting."""

from css_inline_minifier.core.aliases import AliasNotFoundError, AliasTable
from css_inline_minifier.core.batch import (
    BatchReport,
    FileResult,
    MinifierInputError,
    MinifierOutputError,
    minify_documents,
    minify_files,
)
from css_inline_minifier.core.minifier import CssInlineMinifier
from css_inline_minifier.core.result import MinificationResult
from css_inline_minifier.core.symbols import DEFAULT_ALPHABET, SymbolGenerator
from css_inline_minifier.core.whitelist import RESERVED_ENTRIES, Whitelist

__all__ = [
    "AliasNotFoundError",
    "AliasTable",
    "BatchReport",
    "CssInlineMinifier",
    "DEFAULT_ALPHABET",
    "FileResult",
    "MinificationResult",
    "MinifierInputError",
    "MinifierOutputError",
    "RESERVED_ENTRIES",
    "SymbolGenerator",
    "Whitelist",
    "minify_documents",
    "minify_files",
]
