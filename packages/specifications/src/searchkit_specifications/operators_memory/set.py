"""Membership operators: in, not_in."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator


def _as_collection(condition_value: Any) -> Any:
    if isinstance(condition_value, (list, tuple, set, frozenset)):
        return condition_value
    return (condition_value,)


class InOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value in _as_collection(condition_value)


class NotInOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value not in _as_collection(condition_value)
