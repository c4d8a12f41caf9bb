"""Shared fixtures for filtering tests."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import BaseModel

from searchkit_specifications.schema import EntitySchema


class Product(BaseModel):
    id: int
    name: str
    category: str
    price: float
    in_stock: bool = True
    released: date | None = None


@pytest.fixture
def product_schema() -> EntitySchema:
    return EntitySchema.from_pydantic(Product)


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id=1, name="Gaming Laptop", category="Electronics", price=1500),
        Product(
            id=2, name="Office Laptop", category="Electronics", price=999, in_stock=False
        ),
        Product(id=3, name="Laptop Stand", category="Accessories", price=49),
        Product(
            id=4, name="laptop sleeve", category="Consumer Electronics", price=999
        ),
        Product(
            id=5,
            name="Monitor",
            category="Electronics",
            price=299,
            released=date(2021, 6, 30),
        ),
    ]
