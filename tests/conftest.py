"""Pytest fixtures for order pricing and quotes."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from order_pricing.catalog import ACCESSORIES, ProductCatalog
from order_pricing.discounts import DiscountEngine
from order_pricing.orders import OrderService
from order_pricing.store import QuoteStore


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def catalog() -> ProductCatalog:
    catalog = ProductCatalog()

    catalog.add_product("sku-001", "Product A", Decimal("79.90"), "electronics")
    catalog.add_product("sku-002", "Product B", Decimal("39.90"), ACCESSORIES)
    catalog.add_product("sku-003", "Product C", Decimal("19.90"), "books")
    catalog.add_product("sku-004", "Product D", Decimal("1500.00"), "electronics")
    catalog.add_product("sku-005", "Product E", Decimal("5.00"), ACCESSORIES)
    catalog.add_product("sku-006", "Product F", Decimal("50.00"), ACCESSORIES)  # bulk accessory

    return catalog


@pytest.fixture
def products(catalog):
    return catalog.products


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def quote_store(clock) -> QuoteStore:
    return QuoteStore(clock=clock)


@pytest.fixture
def engine() -> DiscountEngine:
    return DiscountEngine()


@pytest.fixture
def service(catalog, engine, quote_store) -> OrderService:
    return OrderService(catalog, engine, quote_store)
