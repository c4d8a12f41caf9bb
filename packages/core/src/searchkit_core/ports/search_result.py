"""
SearchResult — deferred search outcome: ``await`` for a list or ``.stream()``.

Usage::

    result = await repo.search(spec)

    # everything at once
    items = await result

    # row by row
    async for item in result.stream(batch_size=100):
        process(item)

Repositories hand back a ``SearchResult`` instead of executing the
query immediately, so the HTTP layer and background jobs can pick the
consumption style that suits them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Coroutine, Generator

T = TypeVar("T")


class SearchResult(Generic[T]):
    """
    Lazy search result.

    Nothing runs at construction time; the query executes when the
    caller awaits the result or iterates ``stream()``.

    Parameters
    ----------
    list_fn:
        Zero-argument async callable returning ``list[T]``.
    stream_fn:
        Callable ``(batch_size: int | None) -> AsyncIterator[T]``.
    """

    __slots__ = ("_list_fn", "_stream_fn")

    def __init__(
        self,
        list_fn: Callable[[], Coroutine[Any, Any, list[T]]],
        stream_fn: Callable[[int | None], AsyncIterator[T]],
    ) -> None:
        self._list_fn = list_fn
        self._stream_fn = stream_fn

    def __await__(self) -> Generator[Any, None, list[T]]:
        return self._list_fn().__await__()

    def stream(self, *, batch_size: int | None = None) -> AsyncIterator[T]:
        """Return an ``AsyncIterator[T]`` over the matching records.

        Args:
            batch_size: Rows fetched per round-trip. ``None`` lets the
                backend choose.
        """
        return self._stream_fn(batch_size)

    async def first(self) -> T | None:
        """Return the first match, or ``None`` when nothing matched."""
        items = await self._list_fn()
        return items[0] if items else None

    async def count(self) -> int:
        """Number of matches (evaluates the whole query)."""
        items = await self._list_fn()
        return len(items)
