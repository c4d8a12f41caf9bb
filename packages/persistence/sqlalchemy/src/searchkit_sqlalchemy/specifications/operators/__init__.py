"""
SQLAlchemy operator implementations and default registry.

Usage::

    from searchkit_sqlalchemy.specifications.operators import DEFAULT_SQLA_REGISTRY

    expr = DEFAULT_SQLA_REGISTRY.apply(SpecificationOperator.CONTAINS, column, "Laptop")
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .comparison import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .membership import InOperator, IsNotNullOperator, IsNullOperator, NotInOperator
from .text import (
    ContainsOperator,
    EndsWithOperator,
    IContainsOperator,
    StartsWithOperator,
)


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        InOperator(),
        NotInOperator(),
        ContainsOperator(),
        IContainsOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        IsNullOperator(),
        IsNotNullOperator(),
    )
    return registry


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperatorRegistry",
]
