"""
Compile a specification dictionary (AST) into a SQLAlchemy filter expression.

``build_sqla_filter`` walks the ``to_dict()`` tree produced by a
specification and delegates every leaf to a
:class:`SQLAlchemyOperatorRegistry`. An empty tree (the match-all
specification) compiles to ``true()``.

``apply_query_options`` adds ordering and limit/offset from a
``QueryOptions`` instance to a ``Select`` statement.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import ColumnElement, Select, and_, asc, desc, inspect, not_, or_, true

from searchkit_specifications.exceptions import (
    InvalidFieldError,
    OperatorNotFoundError,
    ValidationError,
)
from searchkit_specifications.operators import SpecificationOperator

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a specification dictionary.

    Args:
        model: The SQLAlchemy mapped class.
        data: Specification dictionary (``spec.to_dict()``).
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Raises:
        InvalidFieldError: If a condition names an attribute the model
            does not map.
    """
    if not data:
        return true()
    expr = _compile_node(model, data, registry or DEFAULT_SQLA_REGISTRY)
    logger.debug("Compiled filter for %s from %s", model.__name__, data)
    return expr


def apply_query_options(
    stmt: Select[Any],
    model: type[Any],
    options: Any,
    *,
    paginate: bool = True,
) -> Select[Any]:
    """
    Apply ordering (and, unless ``paginate`` is false, limit/offset)
    from a ``QueryOptions`` instance.

    ``options`` is typed as ``Any`` so callers may pass any object with
    ``order_by`` / ``limit`` / ``offset`` attributes.
    """
    if options is None:
        return stmt

    order_clauses: list[Any] = []
    for field_expr in getattr(options, "order_by", None) or []:
        descending = field_expr.startswith("-")
        column = _resolve_column(model, field_expr[1:] if descending else field_expr)
        order_clauses.append(desc(column) if descending else asc(column))
    if order_clauses:
        stmt = stmt.order_by(*order_clauses)

    if paginate:
        if getattr(options, "limit", None) is not None:
            stmt = stmt.limit(options.limit)
        if getattr(options, "offset", None):
            stmt = stmt.offset(options.offset)
    return stmt


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    op_str = str(data.get("op", "")).lower()
    children = data.get("conditions") or []

    if op_str == SpecificationOperator.AND.value:
        return and_(*(_compile_node(model, c, registry) for c in children))
    if op_str == SpecificationOperator.OR.value:
        return or_(*(_compile_node(model, c, registry) for c in children))
    if op_str == SpecificationOperator.NOT.value:
        if not children:
            raise ValidationError("'not' requires one condition", path=op_str)
        return not_(_compile_node(model, children[0], registry))

    return _compile_leaf(model, data, registry, op_str)


def _compile_leaf(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
    op_str: str,
) -> ColumnElement[bool]:
    attr: str | None = data.get("attr")
    value = data.get("val")
    if not attr:
        raise ValidationError(f"Specification missing 'attr': {data}", path=op_str)

    # Relationship traversal, e.g. "vendor.name"
    if "." in attr:
        rel_name, nested_attr = attr.split(".", 1)
        rel_attr = getattr(model, rel_name, None)
        relationships = inspect(model).relationships
        if rel_attr is None or rel_name not in relationships:
            raise InvalidFieldError(rel_name, model.__name__, list(relationships.keys()))
        target = relationships[rel_name].mapper.class_
        inner = _compile_leaf(
            target, {"op": op_str, "attr": nested_attr, "val": value}, registry, op_str
        )
        if relationships[rel_name].uselist:
            return cast("ColumnElement[bool]", rel_attr.any(inner))
        return cast("ColumnElement[bool]", rel_attr.has(inner))

    try:
        operator = SpecificationOperator(op_str)
    except ValueError:
        raise OperatorNotFoundError(
            op_str, sorted(o.value for o in registry.supported_operators)
        ) from None
    return registry.apply(operator, _resolve_column(model, attr), value)


def _resolve_column(model: type[Any], attr: str) -> Any:
    column_attrs = inspect(model).column_attrs
    if attr not in column_attrs:
        raise InvalidFieldError(attr, model.__name__, list(column_attrs.keys()))
    return getattr(model, attr)
