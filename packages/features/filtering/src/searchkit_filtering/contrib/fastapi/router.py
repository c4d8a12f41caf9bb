"""Generic criteria-search endpoint for FastAPI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request

from ...parser import FilterParser

if TYPE_CHECKING:
    from pydantic import BaseModel

    from searchkit_core.ports.repository import ISearchRepository
    from searchkit_specifications.schema import EntitySchema
    from searchkit_specifications.translator import FilterTranslator

    from ...config import SearchEndpointConfig

logger = logging.getLogger(__name__)


def create_search_router(
    schema: EntitySchema,
    repository: ISearchRepository[Any],
    *,
    response_model: type[BaseModel] | None = None,
    config: SearchEndpointConfig | None = None,
    translator: FilterTranslator | None = None,
    **router_kwargs: Any,
) -> APIRouter:
    """Create a router exposing ``GET /`` as a search over *repository*.

    Every query parameter except the reserved pagination/sort keys is a
    filter field of *schema*; the response is a JSON array of matching
    entities. Register :func:`register_exception_handlers` on the app so
    invalid filters become ``400`` responses.

    Args:
        schema: Searchable fields of the entity.
        repository: Any ``ISearchRepository`` implementation.
        response_model: Optional pydantic model for the array items.
        config: Query-string parsing configuration.
        translator: Custom translator (default registry otherwise).
        **router_kwargs: Forwarded to ``APIRouter`` (``prefix``, ``tags``...).

    Example:
        ```python
        router = create_search_router(
            schema_from_model(ProductModel),
            SQLAlchemySearchRepository(Product, ProductModel, session_factory),
            response_model=Product,
            prefix="/products",
        )
        app.include_router(router)
        ```
    """
    parser = FilterParser(translator=translator, config=config)
    router = APIRouter(**router_kwargs)

    @router.get(
        "/",
        response_model=list[response_model] if response_model is not None else None,  # type: ignore[valid-type]
        summary=f"Search {schema.name}",
    )
    async def search(request: Request) -> list[Any]:
        options = parser.build_options(request.query_params, schema)
        items = await (await repository.search(options))
        logger.debug("Search on %s returned %d item(s)", schema.name, len(items))
        return items

    return router
