"""Minifier session tying the whitelist, alias table and rewriters together."""

import logging
from typing import Iterable, List, Optional

from css_inline_minifier.core.aliases import AliasTable
from css_inline_minifier.core.markup import rewrite_class_attributes
from css_inline_minifier.core.result import MinificationResult
from css_inline_minifier.core.stylesheet import (
    AMP_BOILERPLATE_ATTRIBUTES,
    rewrite_sheet,
    rewrite_style_blocks,
)
from css_inline_minifier.core.symbols import DEFAULT_ALPHABET, SymbolGenerator
from css_inline_minifier.core.whitelist import RESERVED_ENTRIES, Whitelist

logger = logging.getLogger(__name__)


class CssInlineMinifier:
    """
    One minification session.

    Markup must be processed before stylesheets: ``rewrite_markup_classes``
    mints aliases in first-seen order and ``rewrite_stylesheets`` keeps only
    the selectors whose classes are known by then. Several documents can be
    fed through the same session to share one alias table.
    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET, whitelist: Optional[Iterable[str]] = None):
        """
        Initialize the session.

        Args:
            alphabet: Symbols used to mint aliases
            whitelist: Extra whitelist entries added after the reserved ones
        """
        self.symbols = SymbolGenerator(alphabet)
        self.whitelist = Whitelist(RESERVED_ENTRIES)
        for entry in whitelist or ():
            self.whitelist.add(entry)
        self.aliases = AliasTable(self.symbols, self.whitelist)

        self.original_bytes = 0
        self.minified_bytes = 0
        self.rules_dropped = 0

    def is_in_whitelist(self, name: str) -> bool:
        return self.whitelist.is_protected(name)

    def has_alias(self, name: str) -> bool:
        return self.aliases.has(name)

    def get_alias(self, name: str) -> str:
        """Return the alias of ``name``; raises AliasNotFoundError if unknown."""
        return self.aliases.get(name)

    def create_alias(self, name: str) -> str:
        return self.aliases.create(name)

    def get_or_create_alias(self, name: str) -> str:
        return self.aliases.get_or_create(name)

    def list_known_class_names(self) -> List[str]:
        return self.aliases.names()

    def discover_whitelist_from_markup(self, html: str) -> None:
        self.whitelist.discover_from_markup(html)

    def rewrite_markup_classes(self, html: str) -> str:
        """Rename every class in the markup, registering new classes on the way."""
        return rewrite_class_attributes(html, self.aliases.get_or_create)

    def _resolve_selector_class(self, name: str) -> Optional[str]:
        if self.aliases.has(name):
            return self.aliases.get(name)
        if self.whitelist.is_protected(name):
            return name
        return None

    def _rewrite_css(self, attributes: str, css: str) -> str:
        sheet = rewrite_sheet(
            css,
            self._resolve_selector_class,
            keep_vendor_prefixes=attributes == AMP_BOILERPLATE_ATTRIBUTES,
        )
        self.original_bytes += sheet.original_size
        self.minified_bytes += sheet.minified_size
        self.rules_dropped += sheet.rules_dropped
        logger.debug(
            "Style block rewritten: %d -> %d bytes (%d rules kept, %d dropped)",
            sheet.original_size,
            sheet.minified_size,
            sheet.rules_kept,
            sheet.rules_dropped,
        )
        return sheet.css

    def rewrite_stylesheets(self, html: str) -> str:
        """Rewrite every ``<style>`` block against the current alias table."""
        return rewrite_style_blocks(html, self._rewrite_css)

    def reset_sizes(self) -> None:
        self.original_bytes = 0
        self.minified_bytes = 0
        self.rules_dropped = 0

    def snapshot(self, text: str) -> MinificationResult:
        return MinificationResult(text=text, original_bytes=self.original_bytes, minified_bytes=self.minified_bytes)

    def minify(self, html: str) -> MinificationResult:
        """
        Minify a self-contained document.

        Args:
            html: HTML with embedded ``<style>`` blocks

        Returns:
            MinificationResult with the rewritten document and size totals
        """
        self.reset_sizes()
        self.discover_whitelist_from_markup(html)
        modified = self.rewrite_markup_classes(html)
        modified = self.rewrite_stylesheets(modified)
        return self.snapshot(modified)
