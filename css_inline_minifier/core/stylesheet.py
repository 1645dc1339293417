"""Parsing and rewriting of CSS inside ``<style>`` blocks.

The scanner only tracks brace depth: a rule is a selector list followed by a
body whose braces balance back to depth zero. Anything nested inside the body
(at-rule contents, braces in values) is carried through verbatim as part of
that body.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

STYLE_BLOCK_RE = re.compile(r"<style([^>]*)>(.*?)</style>", re.S)
CLASS_SELECTOR_RE = re.compile(r"\.([A-Za-z0-9_-]+)")

# Declarations on a vendor-prefixed property, then declarations whose value
# starts with a vendor-prefixed token.
VENDOR_PROPERTY_RE = re.compile(r"-(?:moz|ms)-[\w\s-]+:[^;]+;?", re.S)
VENDOR_VALUE_RE = re.compile(r"[^;:]+:\s*-(?:moz|ms)-[^;]+;?", re.S)

# AMP validator requires the -moz-/-ms- declarations of its boilerplate.
AMP_BOILERPLATE_ATTRIBUTES = " amp-boilerplate"

NOT_PSEUDO_PREFIX = ":not("


class ScanState(str, Enum):
    """Position of the scanner relative to the current rule."""

    OUTSIDE_RULE = "outside_rule"  # Between rules, nothing buffered
    IN_SELECTOR = "in_selector"  # Buffering a selector list
    IN_BODY = "in_body"  # Inside the braces of a rule


@dataclass
class RuleBlock:
    """A top-level rule as found in the source, before any rewriting."""

    selectors: str
    body: str


class RuleScanner:
    """
    Character walk splitting CSS text into top-level rule blocks.

    Only transitions of the depth counter to and from zero are significant.
    An opening brace at depth zero ends the selector list; the closing brace
    that brings depth back to zero ends the body. Other braces stay in the
    body text. Content left open when the input ends is dropped.
    """

    def __init__(self):
        self.state = ScanState.OUTSIDE_RULE
        self.depth = 0
        self._buffer: List[str] = []
        self._selectors = ""

    def feed(self, css: str) -> Iterator[RuleBlock]:
        """
        Scan ``css`` and yield every rule closed along the way.

        Args:
            css: Stylesheet text

        Yields:
            RuleBlock for each top-level rule
        """
        for char in css:
            if char == "{":
                opening = self.depth == 0
                self.depth += 1
                if opening:
                    self._selectors = "".join(self._buffer)
                    self._buffer = []
                    self.state = ScanState.IN_BODY
                    continue
            elif char == "}":
                self.depth -= 1
                if self.depth == 0:
                    block = RuleBlock(selectors=self._selectors, body="".join(self._buffer))
                    self._buffer = []
                    self.state = ScanState.OUTSIDE_RULE
                    yield block
                    continue

            self._buffer.append(char)
            if self.state == ScanState.OUTSIDE_RULE:
                self.state = ScanState.IN_SELECTOR

    @property
    def pending(self) -> str:
        """Text buffered since the last structural boundary."""
        return "".join(self._buffer)


def rewrite_selector(selector: str, resolve: Callable[[str], Optional[str]]) -> Tuple[str, bool]:
    """
    Rewrite the class identifiers of a single candidate selector.

    Args:
        selector: One member of a comma-separated selector list
        resolve: Returns the replacement for a class name, or None when the
            class is neither aliased nor whitelisted

    Returns:
        Tuple of (rewritten selector, whether the selector is still valid)
    """
    valid = True

    def replace(match: "re.Match[str]") -> str:
        nonlocal valid
        replacement = resolve(match.group(1))
        if replacement is not None:
            return "." + replacement
        start = match.start()
        if start >= len(NOT_PSEUDO_PREFIX) and selector[start - len(NOT_PSEUDO_PREFIX):start] == NOT_PSEUDO_PREFIX:
            return match.group(0)
        valid = False
        return ""

    rewritten = CLASS_SELECTOR_RE.sub(replace, selector)
    return rewritten, valid


def strip_vendor_declarations(body: str) -> str:
    """Remove ``-moz-`` and ``-ms-`` declarations from a rule body."""
    body = VENDOR_PROPERTY_RE.sub("", body)
    return VENDOR_VALUE_RE.sub("", body).strip()


def rewrite_rule(
    block: RuleBlock,
    resolve: Callable[[str], Optional[str]],
    keep_vendor_prefixes: bool = False,
) -> Optional[str]:
    """
    Rebuild a rule with surviving selectors.

    Args:
        block: Rule as scanned
        resolve: Class name resolver, see ``rewrite_selector``
        keep_vendor_prefixes: Skip removal of ``-moz-``/``-ms-`` declarations

    Returns:
        Rewritten rule text, or None when the rule is dropped
    """
    valid = []
    for candidate in block.selectors.split(","):
        rewritten, ok = rewrite_selector(candidate, resolve)
        if ok:
            valid.append(rewritten)

    if not valid:
        logger.debug("Dropping rule with unused selectors: %s", block.selectors.strip())
        return None

    body = block.body if keep_vendor_prefixes else strip_vendor_declarations(block.body)
    if not body:
        logger.debug("Dropping rule with empty body: %s", block.selectors.strip())
        return None

    return ",".join(valid) + "{" + body + "}"


@dataclass
class SheetRewrite:
    """Outcome of rewriting the CSS of one style block."""

    css: str
    original_size: int
    rules_kept: int = 0
    rules_dropped: int = 0

    @property
    def minified_size(self) -> int:
        return len(self.css)


def rewrite_sheet(
    css: str,
    resolve: Callable[[str], Optional[str]],
    keep_vendor_prefixes: bool = False,
) -> SheetRewrite:
    """Scan a stylesheet and rewrite each of its top-level rules."""
    rules = []
    dropped = 0
    scanner = RuleScanner()
    for block in scanner.feed(css):
        rule = rewrite_rule(block, resolve, keep_vendor_prefixes)
        if rule is None:
            dropped += 1
        else:
            rules.append(rule)
    if scanner.depth != 0 or scanner.pending.strip():
        logger.debug("Discarding unterminated CSS (depth %d): %.80s", scanner.depth, scanner.pending.strip())
    return SheetRewrite(
        css="".join(rules),
        original_size=len(css),
        rules_kept=len(rules),
        rules_dropped=dropped,
    )


def rewrite_style_blocks(content: str, rewrite: Callable[[str, str], str]) -> str:
    """
    Replace the CSS of every ``<style>`` block in ``content``.

    Args:
        content: HTML text
        rewrite: Called with (attribute string, css) and returns the new css

    Returns:
        HTML with rewritten style blocks; tag attributes are kept as written
    """

    def replace(match: "re.Match[str]") -> str:
        attributes = match.group(1)
        return "<style" + attributes + ">" + rewrite(attributes, match.group(2)) + "</style>"

    return STYLE_BLOCK_RE.sub(replace, content)
