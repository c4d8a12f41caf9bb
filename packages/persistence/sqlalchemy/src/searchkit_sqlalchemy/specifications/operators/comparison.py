"""Comparison operators for SQLAlchemy: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator as op_module
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, cast

from searchkit_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class _BinaryOperator(SQLAlchemyOperator):
    operator: ClassVar[SpecificationOperator]
    fn: ClassVar[Callable[[Any, Any], Any]]

    @property
    def name(self) -> SpecificationOperator:
        return self.operator

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", type(self).fn(column, value))


class EqualOperator(_BinaryOperator):
    operator = SpecificationOperator.EQ
    fn = op_module.eq


class NotEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.NE
    fn = op_module.ne


class GreaterThanOperator(_BinaryOperator):
    operator = SpecificationOperator.GT
    fn = op_module.gt


class LessThanOperator(_BinaryOperator):
    operator = SpecificationOperator.LT
    fn = op_module.lt


class GreaterEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.GE
    fn = op_module.ge


class LessEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.LE
    fn = op_module.le
