"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    InfrastructureError,
    PersistenceError,
    SearchKitError,
    ValidationError,
)

__all__ = [
    "InfrastructureError",
    "PersistenceError",
    "SearchKitError",
    "ValidationError",
]
