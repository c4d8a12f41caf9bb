"""Filtering package exceptions."""

from __future__ import annotations

from searchkit_core.primitives.exceptions import ValidationError


class FilterParseError(ValidationError):
    """Raised when a reserved query parameter (limit, offset, sort) is malformed."""
