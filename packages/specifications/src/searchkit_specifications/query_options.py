"""
Query options: pagination and ordering around a specification.

A specification decides *which* records match; ``QueryOptions`` says
*how* the executor returns them. Translation never sets these fields;
the HTTP layer or the calling code does.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from searchkit_core.domain.specification import ISpecification


@dataclass(frozen=True)
class QueryOptions:
    """
    Immutable container for result-shaping parameters.

    Attributes:
        specification: The predicate set (``None`` = no filter).
        limit: Maximum number of results.
        offset: Number of results to skip.
        order_by: Field ordering list.
            Prefix with ``-`` for descending, e.g. ``["-price", "name"]``.
    """

    specification: ISpecification[Any] | None = None
    limit: int | None = None
    offset: int | None = None
    order_by: list[str] = field(default_factory=list)

    def with_specification(self, spec: ISpecification[Any]) -> QueryOptions:
        """Return a copy with the specification replaced."""
        return replace(self, specification=spec, order_by=list(self.order_by))

    def with_pagination(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> QueryOptions:
        """Return a copy with updated pagination parameters."""
        return replace(
            self,
            limit=limit if limit is not None else self.limit,
            offset=offset if offset is not None else self.offset,
            order_by=list(self.order_by),
        )

    def with_ordering(self, *fields: str) -> QueryOptions:
        """Return a copy with updated ordering."""
        return replace(self, order_by=list(fields))

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        result: dict[str, Any] = {}
        if self.specification is not None:
            result["specification"] = self.specification.to_dict()
        if self.limit is not None:
            result["limit"] = self.limit
        if self.offset is not None:
            result["offset"] = self.offset
        if self.order_by:
            result["order_by"] = list(self.order_by)
        return result
