"""Tests for the root exception hierarchy."""

from __future__ import annotations

from searchkit_core.primitives.exceptions import (
    InfrastructureError,
    PersistenceError,
    SearchKitError,
    ValidationError,
)


class TestExceptions:
    def test_base_to_dict(self) -> None:
        assert SearchKitError("boom").to_dict() == {
            "error": "SearchKitError",
            "message": "boom",
        }

    def test_validation_error_from_string(self) -> None:
        err = ValidationError("bad input")
        assert err.errors == {"__root__": ["bad input"]}
        assert err.to_dict()["error"] == "VALIDATION_ERROR"

    def test_validation_error_from_mapping(self) -> None:
        err = ValidationError({"limit": ["must be an integer"]})
        assert err.to_dict() == {
            "error": "VALIDATION_ERROR",
            "errors": {"limit": ["must be an integer"]},
        }

    def test_validation_error_empty(self) -> None:
        assert ValidationError().errors == {}

    def test_persistence_is_infrastructure(self) -> None:
        assert issubclass(PersistenceError, InfrastructureError)
        assert issubclass(InfrastructureError, SearchKitError)
