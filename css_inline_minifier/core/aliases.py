"""Mapping between original class names and their minified aliases."""

import logging
from typing import Dict, List

from css_inline_minifier.core.symbols import SymbolGenerator
from css_inline_minifier.core.whitelist import Whitelist

logger = logging.getLogger(__name__)


class AliasNotFoundError(KeyError):
    """Raised when a class name has no alias yet."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No alias registered for class '{self.name}'"


class AliasTable:
    """Insertion-ordered alias registry backed by a symbol generator."""

    def __init__(self, symbols: SymbolGenerator, whitelist: Whitelist):
        self.symbols = symbols
        self.whitelist = whitelist
        self._aliases: Dict[str, str] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def has(self, name: str) -> bool:
        return name in self._aliases

    def get(self, name: str) -> str:
        try:
            return self._aliases[name]
        except KeyError:
            raise AliasNotFoundError(name) from None

    def create(self, name: str) -> str:
        """
        Register an alias for ``name``.

        Whitelisted names alias to themselves and leave the generator cursor
        untouched.
        """
        alias = name if self.whitelist.is_protected(name) else self.symbols.next()
        self._aliases[name] = alias
        logger.debug("Alias %s -> %s", name, alias)
        return alias

    def get_or_create(self, name: str) -> str:
        if name in self._aliases:
            return self._aliases[name]
        return self.create(name)

    def names(self) -> List[str]:
        """Original class names in the order they were first registered."""
        return list(self._aliases)

    def items(self) -> Dict[str, str]:
        return dict(self._aliases)
