"""ISearchRepository — generic search port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..domain.specification import ISpecification
    from ..ports.search_result import SearchResult

T = TypeVar("T")


@runtime_checkable
class ISearchRepository(Protocol[T]):
    """
    Query-execution port for criteria searches.

    The ``search`` method accepts either an ``ISpecification[T]`` or a
    ``QueryOptions`` instance (which wraps a specification together with
    pagination and ordering).  It returns a :class:`SearchResult[T]` —
    ``await`` it for a ``list[T]``, or call ``.stream(batch_size=…)``
    for an ``AsyncIterator[T]``::

        # batch
        result = await repo.search(spec)
        items = await result

        # stream
        result = await repo.search(spec)
        async for item in result.stream(batch_size=100):
            ...
    """

    async def search(
        self,
        criteria: ISpecification[T] | Any,  # ISpecification | QueryOptions
    ) -> SearchResult[T]: ...
