"""API query parsing — filter, sort, pagination for search endpoints."""

from __future__ import annotations

from .config import SearchEndpointConfig
from .exceptions import FilterParseError
from .pagination import PaginationParser, PaginationResult
from .parser import FilterParser, ParsedQuery

__all__ = [
    "FilterParseError",
    "FilterParser",
    "PaginationParser",
    "PaginationResult",
    "ParsedQuery",
    "SearchEndpointConfig",
]
