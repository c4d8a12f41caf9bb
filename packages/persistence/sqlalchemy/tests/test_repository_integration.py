"""
Integration tests for SQLAlchemySearchRepository on aiosqlite.

Covers:
- Translated filters executed end to end (substring / equality / empty)
- Case-sensitive contains on SQLite through the in-memory re-check
- Pagination and ordering with and without the re-check
- Streaming via search(...).stream()
- Entities narrower than the table, Numeric columns and relationship paths
- Error wrapping (RepositoryError, MappingError)
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
from pydantic import BaseModel
from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, Numeric, String
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.pool import StaticPool

from searchkit_core.ports.repository import ISearchRepository
from searchkit_specifications import (
    AttributeSpecification,
    FilterTranslator,
    MatchAllSpecification,
    QueryOptions,
    build_default_registry,
)
from searchkit_specifications.exceptions import InvalidFieldError
from searchkit_sqlalchemy import (
    MappingError,
    RepositoryError,
    SQLAlchemySearchRepository,
    schema_from_model,
)

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class ProductModel(Base):
    __tablename__ = "products"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    category: Mapped[str] = mapped_column(String)
    price: Mapped[float] = mapped_column(Float)
    in_stock: Mapped[bool] = mapped_column(Boolean, default=True)
    released: Mapped[date | None] = mapped_column(Date, nullable=True)


class VendorModel(Base):
    __tablename__ = "vendors"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)


class ItemModel(Base):
    __tablename__ = "items"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String)
    sku: Mapped[str] = mapped_column(String)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    vendor_id: Mapped[int] = mapped_column(ForeignKey("vendors.id"))
    vendor: Mapped[VendorModel] = relationship()


class MissingTableModel(DeclarativeBase):
    pass


class GhostModel(MissingTableModel):
    __tablename__ = "ghosts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class Product(BaseModel):
    id: int
    name: str
    category: str
    price: float
    in_stock: bool = True
    released: date | None = None


class ProductWithColour(Product):
    colour: str


class Item(BaseModel):
    """Public view of an item: no sku, no vendor, price as float."""

    id: int
    title: str
    price: float


SEED = [
    (1, "Gaming Laptop", "Electronics", 1500.0, True, date(2024, 3, 1)),
    (2, "Office Laptop", "Electronics", 999.0, False, date(2023, 9, 15)),
    (3, "Laptop Stand", "Accessories", 49.0, True, date(2022, 1, 10)),
    (4, "laptop sleeve", "Consumer Electronics", 999.0, True, date(2024, 3, 1)),
    (5, "Monitor", "Electronics", 299.0, True, None),
    (6, "50% Off Voucher", "Gift_Cards", 50.0, True, None),
    (7, "500 Off Voucher", "GiftXCards", 500.0, True, None),
]

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [
                ProductModel(
                    id=id,
                    name=name,
                    category=category,
                    price=price,
                    in_stock=in_stock,
                    released=released,
                )
                for id, name, category, price, in_stock, released in SEED
            ]
        )
        await session.commit()
    return factory


@pytest.fixture
async def item_repo(session_factory) -> SQLAlchemySearchRepository[Item]:
    async with session_factory() as session:
        session.add_all(
            [
                VendorModel(id=1, name="Acme"),
                VendorModel(id=2, name="Globex"),
                ItemModel(id=1, title="Desk", sku="AB-1", price=Decimal("999.99"), vendor_id=1),
                ItemModel(id=2, title="Chair", sku="ab-2", price=Decimal("49.50"), vendor_id=2),
                ItemModel(id=3, title="Lamp", sku="CD-3", price=Decimal("999.99"), vendor_id=2),
            ]
        )
        await session.commit()
    return SQLAlchemySearchRepository(Item, ItemModel, session_factory)


@pytest.fixture
def repo(session_factory) -> SQLAlchemySearchRepository[Product]:
    return SQLAlchemySearchRepository(Product, ProductModel, session_factory)


@pytest.fixture
def schema():
    return schema_from_model(ProductModel, name="Product")


@pytest.fixture
def translator() -> FilterTranslator:
    return FilterTranslator()


async def _ids(repo, criteria) -> list[int]:
    return [p.id for p in await (await repo.search(criteria))]


# ---------------------------------------------------------------------------
# Tests: translated filters end to end
# ---------------------------------------------------------------------------


async def test_empty_filter_returns_every_record(repo, schema, translator):
    spec = translator.translate({}, schema)
    assert isinstance(spec, MatchAllSpecification)
    assert sorted(await _ids(repo, spec)) == [1, 2, 3, 4, 5, 6, 7]


async def test_all_null_filter_returns_every_record(repo, schema, translator):
    spec = translator.translate({"name": None, "price": None}, schema)
    assert sorted(await _ids(repo, spec)) == [1, 2, 3, 4, 5, 6, 7]


async def test_text_filters_use_substring(repo, schema, translator):
    spec = translator.translate({"name": "Laptop", "category": "Electronics"}, schema)
    assert sorted(await _ids(repo, spec)) == [1, 2]


async def test_numeric_filter_uses_equality(repo, schema, translator):
    spec = translator.translate({"price": 999}, schema)
    assert sorted(await _ids(repo, spec)) == [2, 4]


async def test_boolean_filter(repo, schema, translator):
    spec = translator.translate({"in_stock": False}, schema)
    assert await _ids(repo, spec) == [2]


async def test_contains_is_case_sensitive_on_sqlite(repo, schema, translator):
    spec = translator.translate({"name": "laptop"}, schema)
    assert await _ids(repo, spec) == [4]


async def test_wildcards_in_search_term_are_literal(repo, schema, translator):
    assert await _ids(repo, translator.translate({"name": "50%"}, schema)) == [6]
    assert await _ids(repo, translator.translate({"category": "t_C"}, schema)) == [6]


async def test_unknown_field_fails_before_query(repo, schema, translator):
    with pytest.raises(InvalidFieldError):
        translator.translate({"bogus": "x"}, schema)


# ---------------------------------------------------------------------------
# Tests: QueryOptions
# ---------------------------------------------------------------------------


async def test_ordering_and_sql_pagination_without_filter(repo):
    options = QueryOptions(order_by=["-price", "id"], limit=3, offset=1)
    assert await _ids(repo, options) == [2, 4, 7]


async def test_pagination_applies_after_recheck(repo, schema, translator):
    spec = translator.translate({"name": "Laptop"}, schema)
    options = QueryOptions(specification=spec, order_by=["id"], limit=1, offset=1)
    # SQLite LIKE also returns "laptop sleeve"; the page is cut after it is dropped
    assert await _ids(repo, options) == [2]


async def test_without_recheck_database_semantics_apply(session_factory, schema, translator):
    repo = SQLAlchemySearchRepository(
        Product, ProductModel, session_factory, post_filter=False
    )
    spec = translator.translate({"name": "laptop"}, schema)
    assert sorted(await _ids(repo, spec)) == [1, 2, 3, 4]


# ---------------------------------------------------------------------------
# Tests: streaming
# ---------------------------------------------------------------------------


async def test_stream_matches_list(repo, schema, translator):
    spec = translator.translate({"category": "Electronics"}, schema)
    options = QueryOptions(specification=spec, order_by=["id"])
    result = await repo.search(options)
    streamed = [p.id async for p in result.stream(batch_size=2)]
    assert streamed == [1, 2, 4, 5]
    assert streamed == [p.id for p in await result]


async def test_stream_honours_offset_and_limit(repo, schema, translator):
    spec = translator.translate({"name": "Laptop"}, schema)
    options = QueryOptions(specification=spec, order_by=["id"], limit=2, offset=1)
    result = await repo.search(options)
    assert [p.id async for p in result.stream()] == [2, 3]


async def test_stream_returns_entities(repo):
    result = await repo.search(QueryOptions(order_by=["id"], limit=1))
    items = [p async for p in result.stream()]
    assert items == [
        Product(
            id=1,
            name="Gaming Laptop",
            category="Electronics",
            price=1500.0,
            in_stock=True,
            released=date(2024, 3, 1),
        )
    ]


# ---------------------------------------------------------------------------
# Tests: errors and port conformance
# ---------------------------------------------------------------------------


async def test_database_errors_are_wrapped(session_factory):
    repo = SQLAlchemySearchRepository(Product, GhostModel, session_factory)
    with pytest.raises(RepositoryError, match="GhostModel"):
        await (await repo.search(MatchAllSpecification()))


async def test_mapping_errors_are_wrapped(session_factory):
    repo = SQLAlchemySearchRepository(ProductWithColour, ProductModel, session_factory)
    with pytest.raises(MappingError, match="ProductWithColour"):
        await (await repo.search(QueryOptions(limit=1)))


async def test_satisfies_search_port(repo):
    assert isinstance(repo, ISearchRepository)


# ---------------------------------------------------------------------------
# Tests: entity narrower than the mapped table
# ---------------------------------------------------------------------------


@pytest.fixture
def item_schema():
    return schema_from_model(ItemModel, name="Item", exclude=["vendor_id"])


async def test_filter_on_column_hidden_from_entity(item_repo, item_schema, translator):
    spec = translator.translate({"sku": "AB"}, item_schema)
    items = await (await item_repo.search(spec))
    assert items == [Item(id=1, title="Desk", price=999.99)]


async def test_hidden_column_stream(item_repo, item_schema, translator):
    spec = translator.translate({"sku": "AB"}, item_schema)
    result = await item_repo.search(QueryOptions(specification=spec, order_by=["id"]))
    assert [i.id async for i in result.stream(batch_size=1)] == [1]


async def test_numeric_column_equality(item_repo, item_schema, translator):
    typed = item_schema.parse_filter({"price": "999.99"})
    spec = translator.translate(typed, item_schema)
    assert spec.to_dict()["conditions"][0]["val"] == Decimal("999.99")
    options = QueryOptions(specification=spec, order_by=["id"])
    items = await (await item_repo.search(options))
    assert [i.id for i in items] == [1, 3]
    assert items[0].price == 999.99


async def test_numeric_column_decimal_value(item_repo, item_schema, translator):
    spec = translator.translate({"price": Decimal("49.5")}, item_schema)
    assert await _ids(item_repo, spec) == [2]


async def test_relationship_path_rechecked(item_repo):
    spec = AttributeSpecification(
        "vendor.name", "contains", "Glob", registry=build_default_registry()
    )
    options = QueryOptions(specification=spec, order_by=["id"])
    assert await _ids(item_repo, options) == [2, 3]
