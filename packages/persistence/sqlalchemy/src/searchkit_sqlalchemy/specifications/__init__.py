"""
Specification-to-SQLAlchemy compilation.

Public API:
    - ``build_sqla_filter(model, data)`` — compile a spec dict to a
      ``ColumnElement[bool]``
    - ``apply_query_options(stmt, model, options)`` — apply
      ``QueryOptions`` ordering and pagination to a ``Select``
    - ``DEFAULT_SQLA_REGISTRY`` — the default operator registry
    - ``SQLAlchemyOperator`` / ``SQLAlchemyOperatorRegistry`` — extension
      points for custom operators
"""

from .compiler import apply_query_options, build_sqla_filter
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "build_sqla_filter",
    "apply_query_options",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
]
