"""Rewriting of ``class`` attributes in HTML markup."""

import re
from typing import Callable

CLASS_ATTRIBUTE_RE = re.compile(r"""(\s)class=["']([^"']+)["']""", re.S)


def rewrite_class_attributes(content: str, resolve: Callable[[str], str]) -> str:
    """
    Replace every class token with ``resolve(token)``.

    Tokens are resolved in document order, which is what fixes alias
    numbering. The attribute is always re-emitted with double quotes and
    single spaces between tokens.

    Args:
        content: HTML text
        resolve: Maps an original class name to its alias

    Returns:
        HTML with rewritten class attributes
    """

    def replace(match: "re.Match[str]") -> str:
        aliases = [resolve(name) for name in match.group(2).split()]
        return f'{match.group(1)}class="{" ".join(aliases)}"'

    return CLASS_ATTRIBUTE_RE.sub(replace, content)
