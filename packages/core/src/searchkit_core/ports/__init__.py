from .repository import ISearchRepository
from .search_result import SearchResult

__all__ = [
    "ISearchRepository",
    "SearchResult",
]
