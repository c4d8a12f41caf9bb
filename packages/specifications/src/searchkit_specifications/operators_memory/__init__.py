"""
In-memory operator implementations.

Usage::

    from searchkit_specifications.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(SpecificationOperator.CONTAINS, "Gaming Laptop", "Laptop")
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .null import IsNotNullOperator, IsNullOperator
from .set import InOperator, NotInOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import (
    ContainsOperator,
    EndsWithOperator,
    IContainsOperator,
    StartsWithOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a fresh registry populated with every built-in operator.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(SpecificationOperator.EQ, 999, 999)
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Comparison
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        # Membership
        InOperator(),
        NotInOperator(),
        # Text
        ContainsOperator(),
        IContainsOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        # Null
        IsNullOperator(),
        IsNotNullOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
