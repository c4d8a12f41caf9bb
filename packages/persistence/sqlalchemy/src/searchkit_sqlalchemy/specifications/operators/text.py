"""
Text operators for SQLAlchemy.

String values are passed with ``autoescape=True`` so ``%`` and ``_``
inside a search term match literally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from searchkit_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


def _like_kwargs(value: Any) -> dict[str, Any]:
    # autoescape only accepts str
    return {"autoescape": True} if isinstance(value, str) else {}


class ContainsOperator(SQLAlchemyOperator):
    """``column LIKE '%' || value || '%'``.

    Case sensitivity follows the database collation; the search
    repository re-checks rows in memory for exact semantics.
    """

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.CONTAINS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", column.contains(value, **_like_kwargs(value))
        )


class IContainsOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ICONTAINS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", column.icontains(value, **_like_kwargs(value))
        )


class StartsWithOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.STARTSWITH

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", column.startswith(value, **_like_kwargs(value))
        )


class EndsWithOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ENDSWITH

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", column.endswith(value, **_like_kwargs(value))
        )
