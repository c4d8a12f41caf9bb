"""
Schema descriptors: the searchable fields of an entity and their types.

An :class:`EntitySchema` is registered once per searchable entity. It
answers two questions for the translator: *is this a field?* and *does
this value fit the field?* It also generates a typed filter model
(pydantic, all fields optional, unknown fields forbidden) so HTTP input
can be validated and coerced before translation.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, create_model
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidFieldError, TypeMismatchError

logger = logging.getLogger(__name__)


class FieldType(str, Enum):
    """Semantic type of a searchable field."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OTHER = "other"


_DEFAULT_PYTHON_TYPES: dict[FieldType, Any] = {
    FieldType.TEXT: str,
    FieldType.NUMBER: float,
    FieldType.BOOLEAN: bool,
    FieldType.DATE: date,
    FieldType.OTHER: Any,
}


def unwrap_optional(annotation: Any) -> Any:
    """``Optional[X]`` / ``X | None`` → ``X``; anything else unchanged."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def field_type_for(python_type: Any) -> FieldType:
    """Map a python type to its :class:`FieldType`."""
    python_type = unwrap_optional(python_type)
    if not isinstance(python_type, type):
        return FieldType.OTHER
    # bool subclasses int, check it first
    if issubclass(python_type, bool):
        return FieldType.BOOLEAN
    if issubclass(python_type, str):
        return FieldType.TEXT
    if issubclass(python_type, (int, float, Decimal)):
        return FieldType.NUMBER
    if issubclass(python_type, date):
        return FieldType.DATE
    return FieldType.OTHER


@dataclass(frozen=True)
class FieldDescriptor:
    """One searchable field."""

    name: str
    field_type: FieldType
    python_type: Any = None

    @property
    def annotation(self) -> Any:
        """The python type used for coercion in the typed filter model."""
        if self.python_type is not None:
            return self.python_type
        return _DEFAULT_PYTHON_TYPES[self.field_type]

    def accepts(self, value: Any) -> bool:
        """Whether *value* is compatible with this field's declared type."""
        if self.field_type is FieldType.OTHER:
            return True
        if self.field_type is FieldType.TEXT:
            return isinstance(value, str)
        if self.field_type is FieldType.NUMBER:
            return isinstance(value, (int, float, Decimal)) and not isinstance(
                value, bool
            )
        if self.field_type is FieldType.BOOLEAN:
            return isinstance(value, bool)
        return isinstance(value, date)


class EntitySchema:
    """
    The set of valid field names and their types for one entity.

    Fields may be given as :class:`FieldType` members, python types or
    ready-made :class:`FieldDescriptor` instances::

        schema = EntitySchema(
            "Product",
            {"name": str, "category": FieldType.TEXT, "price": float},
        )
    """

    def __init__(
        self,
        name: str,
        fields: Mapping[str, FieldType | FieldDescriptor | Any],
    ) -> None:
        self.name = name
        self._fields: dict[str, FieldDescriptor] = {
            field_name: self._describe(field_name, spec)
            for field_name, spec in fields.items()
        }
        self._filter_model: type[BaseModel] | None = None

    @staticmethod
    def _describe(field_name: str, spec: Any) -> FieldDescriptor:
        if isinstance(spec, FieldDescriptor):
            return spec
        if isinstance(spec, FieldType):
            return FieldDescriptor(field_name, spec)
        python_type = unwrap_optional(spec)
        return FieldDescriptor(field_name, field_type_for(python_type), python_type)

    @classmethod
    def from_pydantic(
        cls,
        model_cls: type[BaseModel],
        *,
        name: str | None = None,
        exclude: Iterable[str] = (),
    ) -> EntitySchema:
        """Build a schema from a pydantic model's field annotations."""
        skipped = set(exclude)
        fields = {
            field_name: info.annotation
            for field_name, info in model_cls.model_fields.items()
            if field_name not in skipped
        }
        return cls(name or model_cls.__name__, fields)

    # ------------------------------------------------------------------ #
    # Lookup                                                              #
    # ------------------------------------------------------------------ #

    @property
    def field_names(self) -> list[str]:
        return sorted(self._fields)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"EntitySchema({self.name!r}, fields={self.field_names!r})"

    def get(self, field_name: str) -> FieldDescriptor:
        """
        Return the descriptor for *field_name*.

        Raises:
            InvalidFieldError: If the field is not part of this schema.
        """
        try:
            return self._fields[field_name]
        except KeyError:
            raise InvalidFieldError(
                field_name, self.name, list(self._fields)
            ) from None

    def check_value(self, field_name: str, value: Any) -> FieldDescriptor:
        """
        Validate that *value* fits *field_name*'s declared type.

        Raises:
            InvalidFieldError: If the field is unknown.
            TypeMismatchError: If the value's type is incompatible.
        """
        descriptor = self.get(field_name)
        if not descriptor.accepts(value):
            raise TypeMismatchError(
                field_name, descriptor.field_type.value, value, schema_name=self.name
            )
        return descriptor

    # ------------------------------------------------------------------ #
    # Typed filter model                                                  #
    # ------------------------------------------------------------------ #

    def filter_model(self) -> type[BaseModel]:
        """
        The typed filter descriptor for this schema.

        Generated on first use and cached: every field is optional
        (default ``None``) and unknown fields are rejected.
        """
        if self._filter_model is None:
            definitions: dict[str, Any] = {
                d.name: (Optional[d.annotation], None) for d in self._fields.values()
            }
            self._filter_model = create_model(
                f"{self.name}Filter",
                __config__=ConfigDict(extra="forbid", protected_namespaces=()),
                **definitions,
            )
            logger.debug(
                "Generated filter model %s with fields %s",
                self._filter_model.__name__,
                self.field_names,
            )
        return self._filter_model

    def parse_filter(self, raw: Mapping[str, Any]) -> BaseModel:
        """
        Validate and coerce a raw mapping through :meth:`filter_model`.

        Unknown keys are reported before bad values.

        Raises:
            InvalidFieldError: For the first key not in the schema.
            TypeMismatchError: For the first value that cannot be coerced.
        """
        model = self.filter_model()
        try:
            return model.model_validate(dict(raw))
        except PydanticValidationError as exc:
            errors = exc.errors()
            for err in errors:
                if err["type"] == "extra_forbidden":
                    raise InvalidFieldError(
                        str(err["loc"][0]), self.name, list(self._fields)
                    ) from exc
            err = errors[0]
            field_name = str(err["loc"][0]) if err["loc"] else "<root>"
            descriptor = self._fields.get(field_name)
            expected = (
                descriptor.field_type.value if descriptor is not None else "unknown"
            )
            raise TypeMismatchError(
                field_name, expected, err.get("input"), schema_name=self.name
            ) from exc
