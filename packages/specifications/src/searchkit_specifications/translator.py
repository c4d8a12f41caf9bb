"""
Filter-to-predicate translation.

Turns a caller-supplied filter (``{field: value}``) into a conjunction
of conditions that any query executor can run:

- string values produce a case-sensitive ``contains`` condition;
- every other value produces an ``=`` condition;
- ``None`` values are skipped;
- an empty filter yields :class:`MatchAllSpecification`.

Unknown keys raise :class:`InvalidFieldError` and values of the wrong
type raise :class:`TypeMismatchError`, both before any condition is
built.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from .ast import AttributeSpecification
from .base import AndSpecification, BaseSpecification, MatchAllSpecification
from .operators import SpecificationOperator
from .operators_memory import build_default_registry
from .schema import EntitySchema

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry

logger = logging.getLogger(__name__)

FilterInput = Mapping[str, Any] | BaseModel | None


class FilterTranslator:
    """
    Stateless translator bound to one in-memory operator registry.

    Usage::

        translator = FilterTranslator()
        spec = translator.translate({"name": "Laptop", "price": None}, schema)
        spec.to_dict()
        # {'op': 'and', 'conditions': [{'op': 'contains', 'attr': 'name', ...}]}
    """

    def __init__(self, registry: MemoryOperatorRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()

    @property
    def registry(self) -> MemoryOperatorRegistry:
        return self._registry

    def translate(
        self, filter: FilterInput, schema: EntitySchema
    ) -> BaseSpecification[Any]:
        data = self._as_mapping(filter)
        if not data:
            logger.debug("Empty filter on %s, matching all", schema.name)
            return MatchAllSpecification()

        # every key first, so a bad key fails even when its value is None
        for key in data:
            schema.get(key)

        conditions: list[AttributeSpecification[Any]] = []
        for key in sorted(data):
            value = data[key]
            if value is None:
                continue
            schema.check_value(key, value)
            conditions.append(
                AttributeSpecification(
                    key,
                    self._operator_for(value),
                    value,
                    registry=self._registry,
                )
            )

        if not conditions:
            logger.debug("All filter values on %s are null, matching all", schema.name)
            return MatchAllSpecification()

        spec: BaseSpecification[Any] = AndSpecification(*conditions)
        logger.debug("Translated filter on %s: %s", schema.name, spec.to_dict())
        return spec

    @staticmethod
    def _operator_for(value: Any) -> SpecificationOperator:
        if isinstance(value, str):
            return SpecificationOperator.CONTAINS
        return SpecificationOperator.EQ

    @staticmethod
    def _as_mapping(filter: FilterInput) -> Mapping[str, Any]:
        if filter is None:
            return {}
        if isinstance(filter, BaseModel):
            return filter.model_dump(exclude_none=True)
        return filter


_default_translator: FilterTranslator | None = None


def translate_filter(
    filter: FilterInput,
    schema: EntitySchema,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """Translate *filter* against *schema* (default registry unless given)."""
    global _default_translator
    if registry is not None:
        return FilterTranslator(registry).translate(filter, schema)
    if _default_translator is None:
        _default_translator = FilterTranslator()
    return _default_translator.translate(filter, schema)
