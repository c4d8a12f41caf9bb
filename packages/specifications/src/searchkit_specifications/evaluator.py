"""
In-memory operator evaluation strategy.

``MemoryOperator`` is the per-operator strategy; ``MemoryOperatorRegistry``
maps each :class:`SpecificationOperator` to one strategy instance and is
injected into every :class:`AttributeSpecification` leaf.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .operators import SpecificationOperator


class MemoryOperator(ABC):
    """Evaluates one operator against concrete Python values."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Args:
            field_value: The value resolved from the candidate record.
            condition_value: The value carried by the condition.

        Returns:
            True if the condition holds.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by SpecificationOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())

        registry.evaluate(SpecificationOperator.EQ, 999, 999)  # True
    """

    def __init__(self) -> None:
        self._operators: dict[SpecificationOperator, MemoryOperator] = {}

    def register(self, operator: MemoryOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: SpecificationOperator) -> MemoryOperator | None:
        return self._operators.get(name)

    def has(self, name: SpecificationOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._operators)

    def evaluate(
        self,
        name: SpecificationOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {name}")
        return op.evaluate(field_value, condition_value)
