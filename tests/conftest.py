"""Global pytest hooks for test categorization."""

from pathlib import Path

import pytest


@pytest.hookimpl
def pytest_collection_modifyitems(config, items):
    """
    Automatically tag tests with markers based on their location.

    - tests inside the package (css_inline_minifier/tests) → unit
    - all other collected tests → api
    """
    root = Path(config.rootpath)
    for item in items:
        rel = Path(item.path).resolve().relative_to(root)
        if "css_inline_minifier" in rel.parts:
            item.add_marker("unit")
        else:
            item.add_marker("api")
