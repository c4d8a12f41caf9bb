"""searchkit-core — foundation package for the searchkit toolkit.

Zero infrastructure dependencies: exceptions, the specification
protocol, the search repository port and an in-memory executor.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryRepository

# ── Domain ───────────────────────────────────────────────────────
from .domain import ISpecification

# ── Ports ────────────────────────────────────────────────────────
from .ports import ISearchRepository, SearchResult

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    InfrastructureError,
    PersistenceError,
    SearchKitError,
    ValidationError,
)

__all__: list[str] = [
    # Adapters
    "InMemoryRepository",
    # Domain
    "ISpecification",
    # Ports
    "ISearchRepository",
    "SearchResult",
    # Primitives
    "InfrastructureError",
    "PersistenceError",
    "SearchKitError",
    "ValidationError",
]
