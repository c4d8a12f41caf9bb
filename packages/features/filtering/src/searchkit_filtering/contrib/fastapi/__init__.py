"""FastAPI integration for searchkit-filtering."""

from .errors import register_exception_handlers, search_error_handler
from .router import create_search_router

__all__: list[str] = [
    "create_search_router",
    "register_exception_handlers",
    "search_error_handler",
]
