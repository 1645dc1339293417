"""Tests for the minification result."""

from css_inline_minifier.core.result import MinificationResult


def test_to_dict():
    result = MinificationResult(text="<p></p>", original_bytes=300, minified_bytes=100)
    assert result.to_dict() == {
        "html": "<p></p>",
        "original_bytes": 300,
        "minified_bytes": 100,
        "reduced_bytes": 200,
        "reduced_percentage": 66.67,
    }


def test_zero_original_size():
    result = MinificationResult(text="", original_bytes=0, minified_bytes=0)
    assert result.reduced_bytes() == 0
    assert result.reduced_percentage() == 0.0
