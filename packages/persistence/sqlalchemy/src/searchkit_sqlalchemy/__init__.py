"""SQLAlchemy search adapter."""

from __future__ import annotations

from .exceptions import (
    MappingError,
    RepositoryError,
    SQLAlchemyPersistenceError,
)
from .repository import SQLAlchemySearchRepository
from .schema import schema_from_model
from .specifications import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    apply_query_options,
    build_default_sqla_registry,
    build_sqla_filter,
)

__all__ = [
    # Repository / schema
    "SQLAlchemySearchRepository",
    "schema_from_model",
    # Specifications / Compiler
    "build_sqla_filter",
    "apply_query_options",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    # Exceptions
    "SQLAlchemyPersistenceError",
    "RepositoryError",
    "MappingError",
]
