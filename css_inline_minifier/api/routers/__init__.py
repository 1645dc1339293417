"""Router initialization.

This module re-exports router modules so they can be imported both as FastAPI
routers (via the ``router`` attribute) and as modules for testing/monkeypatching.
"""

from . import status_router
from . import minify_router

__all__ = [
    "status_router",
    "minify_router",
]
