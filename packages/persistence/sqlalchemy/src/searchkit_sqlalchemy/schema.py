"""Build an :class:`EntitySchema` from a SQLAlchemy mapped class."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import inspect as sa_inspect

from searchkit_specifications.schema import EntitySchema, FieldType

logger = logging.getLogger(__name__)


def schema_from_model(
    db_model_cls: type[Any],
    *,
    name: str | None = None,
    exclude: Iterable[str] = (),
) -> EntitySchema:
    """
    Describe the searchable columns of *db_model_cls*.

    Every mapped column becomes a field typed by its
    ``column.type.python_type``. Column types that cannot report a
    python type (custom ``TypeDecorator``\\ s, some dialect types) are
    registered as ``FieldType.OTHER`` and filtered by equality.
    Relationships are not included.

    Args:
        db_model_cls: A ``DeclarativeBase`` subclass.
        name: Schema name used in error messages. Defaults to the class name.
        exclude: Column attribute names to hide from search.
    """
    skipped = set(exclude)
    fields: dict[str, Any] = {}
    for attr in sa_inspect(db_model_cls).column_attrs:
        if attr.key in skipped:
            continue
        column = attr.columns[0]
        try:
            fields[attr.key] = column.type.python_type
        except NotImplementedError:
            logger.debug(
                "Column %s.%s has no python type, treating as %s",
                db_model_cls.__name__,
                attr.key,
                FieldType.OTHER.value,
            )
            fields[attr.key] = FieldType.OTHER
    return EntitySchema(name or db_model_cls.__name__, fields)
