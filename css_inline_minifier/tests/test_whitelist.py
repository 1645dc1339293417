"""Tests for the substring whitelist."""

from css_inline_minifier.core.whitelist import RESERVED_ENTRIES, Whitelist


def test_reserved_entries_seeded_by_default():
    assert Whitelist().entries == list(RESERVED_ENTRIES)


def test_protection_is_substring_based():
    whitelist = Whitelist()
    assert whitelist.is_protected("amp-img")
    assert whitelist.is_protected("menu-opened")
    assert whitelist.is_protected("nominify-header")
    assert not whitelist.is_protected("amp")
    assert not whitelist.is_protected("header")


def test_add_ignores_duplicates_and_empty():
    whitelist = Whitelist([])
    assert whitelist.add("js-")
    assert not whitelist.add("js-")
    assert not whitelist.add("")
    assert whitelist.entries == ["js-"]


def test_discover_attribute_selector_fragments():
    whitelist = Whitelist([])
    html = (
        '<style>[class^="col-"]{float:left} [class*=icon]{x:y} '
        "[class$='-end']{a:b} [class~=\"col-\"]{c:d}</style>"
    )
    added = whitelist.discover_from_markup(html)
    assert added == ["col-", "icon", "-end"]
    assert whitelist.entries == ["col-", "icon", "-end"]


def test_discover_is_idempotent():
    whitelist = Whitelist()
    html = '<style>[class|="btn"]{}</style>'
    whitelist.discover_from_markup(html)
    snapshot = whitelist.entries
    assert whitelist.discover_from_markup(html) == []
    assert whitelist.entries == snapshot


def test_plain_class_attribute_selector_not_discovered():
    """[class="x"] has no operator before '=' and is not a fragment match."""
    whitelist = Whitelist([])
    whitelist.discover_from_markup('<style>[class="exact"]{}</style>')
    assert whitelist.entries == []
