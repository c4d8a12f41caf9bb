"""Shared fixtures for specifications tests."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from searchkit_specifications.operators_memory import build_default_registry
from searchkit_specifications.schema import EntitySchema


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()


@pytest.fixture
def product_schema() -> EntitySchema:
    return EntitySchema(
        "Product",
        {
            "id": int,
            "name": str,
            "category": str,
            "price": float,
            "in_stock": bool,
            "released": date,
        },
    )


def _product(
    id: int, name: str, category: str, price: float, in_stock: bool, released: date
) -> dict[str, Any]:
    return {
        "id": id,
        "name": name,
        "category": category,
        "price": price,
        "in_stock": in_stock,
        "released": released,
    }


@pytest.fixture
def products() -> list[dict[str, Any]]:
    return [
        _product(1, "Gaming Laptop", "Electronics", 1500.0, True, date(2024, 3, 1)),
        _product(2, "Office Laptop", "Electronics", 999.0, False, date(2023, 9, 15)),
        _product(3, "Laptop Stand", "Accessories", 49.0, True, date(2022, 1, 10)),
        _product(
            4, "laptop sleeve", "Consumer Electronics", 999.0, True, date(2024, 3, 1)
        ),
        _product(5, "Monitor", "Electronics", 299.0, True, date(2021, 6, 30)),
    ]
