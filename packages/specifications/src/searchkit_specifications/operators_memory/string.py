"""Text operators: contains, icontains, startswith, endswith.

Patterns are literal text, never wildcards: ``contains("50%")`` matches
the three characters ``5``, ``0`` and ``%`` in sequence.
"""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator


class ContainsOperator(MemoryOperator):
    """Case-sensitive substring match."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value) in str(field_value)


class IContainsOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ICONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value).casefold() in str(field_value).casefold()


class StartsWithOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.STARTSWITH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(field_value).startswith(str(condition_value))


class EndsWithOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ENDSWITH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(field_value).endswith(str(condition_value))
