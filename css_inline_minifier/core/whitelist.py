"""Substring whitelist protecting class names from renaming and removal."""

import logging
import re
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

RESERVED_ENTRIES = (
    "amp-",
    "opened",
    "noscroll",
    "submenu",
    "overflow-y",
    "nominify-",
)

# [class^="x"], [class*=x], [class|='x'] ...
ATTRIBUTE_SELECTOR_RE = re.compile(r"""\[class[\^$*~|=]=["']?([^\]"']+)""", re.S)


class Whitelist:
    """
    Ordered collection of protected substrings.

    A name is protected when it *contains* an entry, so ``nominify-`` covers
    the whole ``nominify-*`` family. This is not an equality check.
    """

    def __init__(self, entries: Optional[Iterable[str]] = None):
        self._entries: List[str] = []
        for entry in RESERVED_ENTRIES if entries is None else entries:
            self.add(entry)

    @property
    def entries(self) -> List[str]:
        """Entries in insertion order."""
        return list(self._entries)

    def add(self, entry: str) -> bool:
        """
        Append an entry unless it is already present.

        Returns:
            True if the entry was added
        """
        if not entry or entry in self._entries:
            return False
        self._entries.append(entry)
        return True

    def is_protected(self, name: str) -> bool:
        """Check whether any entry is a substring of ``name``."""
        return any(entry in name for entry in self._entries)

    def discover_from_markup(self, content: str) -> List[str]:
        """
        Add class fragments referenced by attribute selectors.

        Scans for ``[class^=...]``-style patterns so that classes matched by
        prefix, suffix or substring survive renaming.

        Args:
            content: HTML or CSS text

        Returns:
            Entries added by this call, in order of first appearance
        """
        added = []
        for match in ATTRIBUTE_SELECTOR_RE.finditer(content):
            if self.add(match.group(1)):
                added.append(match.group(1))
        if added:
            logger.debug("Whitelisted attribute selector fragments: %s", ", ".join(added))
        return added
