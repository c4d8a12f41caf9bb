"""
Specification exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from searchkit_core.primitives.exceptions import SearchKitError


class SpecificationError(SearchKitError):
    """Base exception for all specification errors."""


class ValidationError(SpecificationError):
    """Specification structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class OperatorNotFoundError(SpecificationError):
    """
    Unknown operator specified.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class InvalidFieldError(ValidationError):
    """
    A filter or sort key that is not a field of the target schema.

    Uses fuzzy matching to suggest similar valid field names.

    Example error message::

        Invalid field 'nmae' on 'Product'.
        Did you mean one of these?
          • name

        Available fields: category, id, name, price
    """

    def __init__(
        self,
        invalid_field: str,
        schema_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.schema_name = schema_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message(), path=invalid_field)

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.schema_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_FIELD",
            "field": self.invalid_field,
            "schema": self.schema_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class TypeMismatchError(ValidationError):
    """
    A filter value whose type is incompatible with the field's declared
    type (e.g. text supplied for a numeric field).
    """

    def __init__(
        self,
        field: str,
        expected: str,
        value: Any,
        schema_name: str | None = None,
    ) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        self.schema_name = schema_name

        where = f" on '{schema_name}'" if schema_name else ""
        message = (
            f"Field '{field}'{where} expects {expected}, "
            f"got {type(value).__name__} {value!r}"
        )
        super().__init__(message, path=field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "TYPE_MISMATCH",
            "field": self.field,
            "expected": self.expected,
            "actual": type(self.value).__name__,
            "schema": self.schema_name,
        }
