"""InMemoryRepository — dict-backed search executor for tests and small datasets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from searchkit_core.ports.repository import ISearchRepository
from searchkit_core.ports.search_result import SearchResult

if TYPE_CHECKING:
    import builtins
    from collections.abc import AsyncIterator, Iterable

    from searchkit_core.domain.specification import ISpecification

T = TypeVar("T")


class InMemoryRepository(ISearchRepository[T], Generic[T]):
    """In-memory implementation of ``ISearchRepository[T]``.

    Stores records in insertion order, keyed by their ``id`` attribute.
    Searches evaluate the specification with ``is_satisfied_by`` and then
    apply the ordering and pagination carried by ``QueryOptions``.
    """

    def __init__(self, records: Iterable[T] | None = None) -> None:
        self._store: dict[Any, T] = {}
        for record in records or ():
            self._store[self._key(record)] = record

    @staticmethod
    def _key(record: Any) -> Any:
        key = record.get("id") if isinstance(record, dict) else getattr(record, "id", None)
        if key is None:
            raise ValueError(f"Record has no 'id': {record!r}")
        return key

    async def add(self, record: T) -> Any:
        key = self._key(record)
        self._store[key] = record
        return key

    async def get(self, record_id: Any) -> T | None:
        return self._store.get(record_id)

    async def list_all(self) -> builtins.list[T]:
        return list(self._store.values())

    async def search(self, criteria: ISpecification[T] | Any) -> SearchResult[T]:
        """Search records matching a specification or ``QueryOptions``."""
        spec, options = _normalise_criteria(criteria)

        async def list_fn() -> list[T]:
            items = [
                record
                for record in self._store.values()
                if spec is None or spec.is_satisfied_by(record)
            ]
            return _apply_options(items, options)

        def stream_fn(batch_size: int | None) -> AsyncIterator[T]:
            async def gen() -> AsyncIterator[T]:
                items = await list_fn()
                batch = batch_size or len(items) or 1
                for i in range(0, len(items), batch):
                    for item in items[i : i + batch]:
                        yield item

            return gen()

        return SearchResult(list_fn=list_fn, stream_fn=stream_fn)

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


def _normalise_criteria(criteria: Any) -> tuple[Any | None, Any | None]:
    """Split *criteria* into ``(specification, query_options)``."""
    if hasattr(criteria, "specification"):
        return criteria.specification, criteria
    return criteria, None


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _apply_options(items: list[T], options: Any | None) -> list[T]:
    if options is None:
        return items
    # Stable sorts applied last-key-first give multi-key ordering.
    for field_expr in reversed(getattr(options, "order_by", None) or []):
        descending = field_expr.startswith("-")
        name = field_expr[1:] if descending else field_expr
        present = [i for i in items if _field(i, name) is not None]
        missing = [i for i in items if _field(i, name) is None]
        present.sort(key=lambda i: _field(i, name), reverse=descending)
        items = present + missing
    offset = getattr(options, "offset", None) or 0
    limit = getattr(options, "limit", None)
    if limit is None:
        return items[offset:]
    return items[offset : offset + limit]
