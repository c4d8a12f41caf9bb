"""Search endpoint configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchEndpointConfig:
    """Configuration for query-string parsing on a search endpoint.

    Attributes:
        limit_key: Query parameter holding the page size.
        offset_key: Query parameter holding the number of rows to skip.
        sort_key: Query parameter holding ``field,-other`` ordering.
        default_limit: Page size when ``limit`` is absent.
        max_limit: Upper bound for ``limit``.
        empty_value_is_null: Treat ``?name=`` as "no constraint" instead of
            an empty-string filter value.
    """

    limit_key: str = "limit"
    offset_key: str = "offset"
    sort_key: str = "sort"
    default_limit: int = 20
    max_limit: int = 100
    empty_value_is_null: bool = True

    def __post_init__(self) -> None:
        if self.default_limit < 1 or self.max_limit < 1:
            raise ValueError("default_limit and max_limit must be positive")
        if self.default_limit > self.max_limit:
            raise ValueError("default_limit cannot exceed max_limit")
        if len({self.limit_key, self.offset_key, self.sort_key}) != 3:
            raise ValueError("limit_key, offset_key and sort_key must differ")

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Query parameters that are never treated as filter fields."""
        return frozenset({self.limit_key, self.offset_key, self.sort_key})
