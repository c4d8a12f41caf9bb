"""
SQLAlchemy operator compilation strategy.

Mirrors the in-memory evaluator: one ``SQLAlchemyOperator`` per
:class:`SpecificationOperator`, collected in a registry that the
compiler consults for every leaf condition.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from searchkit_specifications.exceptions import OperatorNotFoundError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from searchkit_specifications.operators import SpecificationOperator


class SQLAlchemyOperator(ABC):
    """Compiles one operator into a ``ColumnElement[bool]``."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Args:
            column: A mapped attribute or column expression.
            value: The condition value.
        """
        ...


class SQLAlchemyOperatorRegistry:
    """
    Registry of ``SQLAlchemyOperator`` instances keyed by
    :class:`SpecificationOperator`.

    A registry is built once at import time (``DEFAULT_SQLA_REGISTRY``)
    and only read afterwards; use :meth:`copy` before registering custom
    operators so the shared default stays untouched.
    """

    def __init__(self) -> None:
        self._operators: dict[SpecificationOperator, SQLAlchemyOperator] = {}

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyOperator) -> None:
        for operator in operators:
            self.register(operator)

    def unregister(self, name: SpecificationOperator) -> None:
        self._operators.pop(name, None)

    def copy(self) -> SQLAlchemyOperatorRegistry:
        clone = SQLAlchemyOperatorRegistry()
        clone.register_all(*self._operators.values())
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._operators)

    def apply(
        self,
        name: SpecificationOperator,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool]:
        """
        Compile ``column <name> value``.

        Raises:
            OperatorNotFoundError: If no strategy is registered for *name*.
        """
        operator = self._operators.get(name)
        if operator is None:
            raise OperatorNotFoundError(
                str(name.value), sorted(o.value for o in self._operators)
            )
        return operator.apply(column, value)
