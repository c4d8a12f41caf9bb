"""Exceptions for the SQLAlchemy search adapter."""

from __future__ import annotations

from searchkit_core.primitives.exceptions import PersistenceError


class SQLAlchemyPersistenceError(PersistenceError):
    """Base exception for all SQLAlchemy-specific persistence errors."""


class RepositoryError(SQLAlchemyPersistenceError):
    """Raised when a search query fails to execute."""


class MappingError(SQLAlchemyPersistenceError):
    """Raised when a database row cannot be mapped to the entity type."""


__all__: list[str] = [
    "MappingError",
    "RepositoryError",
    "SQLAlchemyPersistenceError",
]
