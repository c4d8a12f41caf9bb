"""Domain primitives: specification protocol."""

from __future__ import annotations

from .specification import ISpecification

__all__: list[str] = [
    "ISpecification",
]
