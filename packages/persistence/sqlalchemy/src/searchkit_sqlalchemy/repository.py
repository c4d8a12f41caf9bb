from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError

from searchkit_core.ports.repository import ISearchRepository
from searchkit_core.ports.search_result import SearchResult

from .exceptions import MappingError, RepositoryError
from .specifications.compiler import apply_query_options, build_sqla_filter

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from searchkit_core.domain.specification import ISpecification

    from .specifications.strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SQLAlchemySearchRepository(ISearchRepository[T], Generic[T]):
    """
    ``ISearchRepository`` backed by an async SQLAlchemy session.

    Separates the entity type returned to callers (``entity_cls``, a
    pydantic model) from the mapped table (``db_model_cls``). Rows are
    converted with ``entity_cls.model_validate(row, from_attributes=True)``.

    The specification is compiled into the ``WHERE`` clause and every
    returned row is checked again with ``is_satisfied_by``, so text
    matching is case-sensitive even on databases whose ``LIKE`` is not.
    The re-check reads the mapped row, not the entity, so it sees the
    same columns and column types the query filtered on.
    Because that second pass can drop rows, limit/offset are applied
    after it whenever a specification is present (``post_filter=True``).

    Each search opens its own session from ``session_factory``::

        repo = SQLAlchemySearchRepository(Product, ProductModel, async_sessionmaker(engine))
        items = await (await repo.search(spec))
        async for item in (await repo.search(options)).stream(batch_size=100):
            ...
    """

    def __init__(
        self,
        entity_cls: type[T],
        db_model_cls: type[Any],
        session_factory: async_sessionmaker[AsyncSession],
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
        post_filter: bool = True,
    ) -> None:
        self.entity_cls = entity_cls
        self.db_model_cls = db_model_cls
        self._session_factory = session_factory
        self._registry = registry
        self._post_filter = post_filter

    def from_model(self, model: Any) -> T:
        """Convert a mapped row into ``entity_cls``."""
        try:
            return self.entity_cls.model_validate(model, from_attributes=True)
        except PydanticValidationError as exc:
            raise MappingError(
                f"Cannot map {type(model).__name__} to {self.entity_cls.__name__}: {exc}"
            ) from exc

    async def search(self, criteria: ISpecification[T] | Any) -> SearchResult[T]:
        """
        Search for entities matching a specification or ``QueryOptions``.

        Nothing runs until the result is awaited or streamed.
        """
        spec, options = self._normalise_criteria(criteria)
        return SearchResult(
            list_fn=lambda: self._execute_search(spec, options),
            stream_fn=lambda batch_size: self._execute_stream(
                spec, options, batch_size=batch_size
            ),
        )

    # -- internal search implementation -------------------------------------

    @staticmethod
    def _normalise_criteria(criteria: Any) -> tuple[Any | None, Any | None]:
        """
        - ``ISpecification`` → ``(spec, None)``
        - ``QueryOptions``   → ``(options.specification, options)``
        """
        if hasattr(criteria, "specification"):
            return criteria.specification, criteria
        return criteria, None

    def _in_memory_paging(self, spec: Any | None) -> bool:
        return self._post_filter and spec is not None and bool(spec.to_dict())

    def _build_query(self, spec: Any | None, options: Any | None) -> Select[Any]:
        query = select(self.db_model_cls)
        if spec is not None:
            spec_data = spec.to_dict()
            if spec_data:
                query = query.where(
                    build_sqla_filter(
                        self.db_model_cls, spec_data, registry=self._registry
                    )
                )
        if options is not None:
            query = apply_query_options(
                query,
                self.db_model_cls,
                options,
                paginate=not self._in_memory_paging(spec),
            )
        return query

    @staticmethod
    def _recheck(spec: Any, models: Sequence[Any]) -> list[Any]:
        return [m for m in models if spec.is_satisfied_by(m)]

    async def _kept_rows(
        self, session: AsyncSession, spec: Any | None, models: Sequence[Any]
    ) -> list[Any]:
        if not self._post_filter or spec is None:
            return list(models)
        # run_sync so relationship paths can lazy-load during the re-check
        return await session.run_sync(lambda _: self._recheck(spec, models))

    async def _execute_search(
        self, spec: Any | None, options: Any | None
    ) -> list[T]:
        query = self._build_query(spec, options)
        logger.debug("Searching %s: %s", self.db_model_cls.__name__, query)
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                models = await self._kept_rows(
                    session, spec, list(result.scalars().all())
                )
                if self._in_memory_paging(spec) and options is not None:
                    offset = options.offset or 0
                    end = None if options.limit is None else offset + options.limit
                    models = models[offset:end]
                return [self.from_model(m) for m in models]
        except SQLAlchemyError as exc:
            raise RepositoryError(
                f"Search on {self.db_model_cls.__name__} failed: {exc}"
            ) from exc

    async def _execute_stream(
        self,
        spec: Any | None,
        options: Any | None,
        *,
        batch_size: int | None = None,
    ) -> AsyncIterator[T]:
        query = self._build_query(spec, options)
        paging = self._in_memory_paging(spec) and options is not None
        skip = (options.offset or 0) if paging else 0
        remaining = options.limit if paging else None

        try:
            async with self._session_factory() as session:
                result = await session.stream_scalars(
                    query.execution_options(yield_per=batch_size or 100)
                )
                async for partition in result.partitions():
                    for model in await self._kept_rows(session, spec, partition):
                        if remaining is not None and remaining <= 0:
                            return
                        if skip:
                            skip -= 1
                            continue
                        if remaining is not None:
                            remaining -= 1
                        yield self.from_model(model)
        except SQLAlchemyError as exc:
            raise RepositoryError(
                f"Stream on {self.db_model_cls.__name__} failed: {exc}"
            ) from exc
