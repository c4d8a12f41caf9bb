"""FilterParser — query params -> typed filter + QueryOptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple

from searchkit_specifications.query_options import QueryOptions
from searchkit_specifications.translator import FilterTranslator

from .config import SearchEndpointConfig
from .exceptions import FilterParseError
from .pagination import PaginationParser

if TYPE_CHECKING:
    from pydantic import BaseModel

    from searchkit_specifications.schema import EntitySchema

logger = logging.getLogger(__name__)


class ParsedQuery(NamedTuple):
    """Filter and result-shaping parameters split out of one query string."""

    filter: BaseModel
    options: QueryOptions


class FilterParser:
    """
    Split a query string into filter fields and reserved parameters.

    Every parameter that is not ``limit`` / ``offset`` / ``sort`` (names
    come from :class:`SearchEndpointConfig`) is a filter field. Filter
    values are validated and coerced through the schema's typed filter
    model, so ``?price=999`` reaches the translator as a number.

    Usage::

        parser = FilterParser()
        options = parser.build_options(request.query_params, schema)
        items = await (await repo.search(options))
    """

    def __init__(
        self,
        translator: FilterTranslator | None = None,
        config: SearchEndpointConfig | None = None,
    ) -> None:
        self.config = config or SearchEndpointConfig()
        self._translator = translator or FilterTranslator()
        self._pagination = PaginationParser(self.config)

    def parse(
        self, query_params: Mapping[str, Any], schema: EntitySchema
    ) -> ParsedQuery:
        """
        Return the typed filter and the pagination/ordering options.

        Raises:
            InvalidFieldError: Unknown filter key or sort field.
            TypeMismatchError: A filter value that cannot be coerced.
            FilterParseError: Malformed ``limit`` / ``offset`` / ``sort``,
                or a parameter given more than once.
        """
        self._reject_repeated(query_params)
        reserved = self.config.reserved_keys
        raw_filter: dict[str, Any] = {}
        for key in query_params:
            if key in reserved:
                continue
            value = query_params[key]
            if self.config.empty_value_is_null and value == "":
                value = None
            raw_filter[key] = value

        typed_filter = schema.parse_filter(raw_filter)
        page = self._pagination.parse(query_params)
        order_by = self._parse_sort(query_params.get(self.config.sort_key), schema)

        logger.debug(
            "Parsed query on %s: filter=%s limit=%s offset=%s sort=%s",
            schema.name,
            raw_filter,
            page.limit,
            page.offset,
            order_by,
        )
        return ParsedQuery(
            filter=typed_filter,
            options=QueryOptions(
                limit=page.limit, offset=page.offset, order_by=order_by
            ),
        )

    def build_options(
        self, query_params: Mapping[str, Any], schema: EntitySchema
    ) -> QueryOptions:
        """Parse, translate the filter and return ready-to-run ``QueryOptions``."""
        parsed = self.parse(query_params, schema)
        spec = self._translator.translate(parsed.filter, schema)
        return parsed.options.with_specification(spec)

    @staticmethod
    def _reject_repeated(query_params: Mapping[str, Any]) -> None:
        """Multi-dicts (starlette ``QueryParams``) keep every value of a key."""
        getlist = getattr(query_params, "getlist", None)
        if getlist is None:
            return
        repeated: dict[str, list[str]] = {}
        for key in query_params:
            count = len(getlist(key))
            if count > 1:
                repeated[key] = [f"given {count} times; pass it once"]
        if repeated:
            raise FilterParseError(repeated)

    def _parse_sort(self, raw: Any, schema: EntitySchema) -> list[str]:
        if raw is None or raw == "":
            return []
        if not isinstance(raw, str):
            raise FilterParseError(
                {self.config.sort_key: [f"expected a string, got {type(raw).__name__}"]}
            )
        order_by: list[str] = []
        for part in raw.split(","):
            item = part.strip()
            if not item:
                continue
            name = item[1:] if item.startswith("-") else item
            if not name:
                raise FilterParseError(
                    {self.config.sort_key: [f"empty field name in {raw!r}"]}
                )
            schema.get(name)
            order_by.append(item)
        return order_by
