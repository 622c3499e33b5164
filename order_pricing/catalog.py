from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

from order_pricing.models import Product

ACCESSORIES = "acessorios"


class ProductCatalog:
    """
    Read-only product lookup kept in memory.

    Prices and categories are static; add_product exists for seeding
    (tests, demo runner).
    """

    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}

    def add_product(self, product_id: str, name: str, unit_price: Decimal, category: str) -> None:
        self.products[product_id] = Product(id=product_id, name=name, unit_price=unit_price, category=category)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)


def default_catalog() -> ProductCatalog:
    catalog = ProductCatalog()
    catalog.add_product("sku-001", "Product A", Decimal("79.90"), "electronics")
    catalog.add_product("sku-002", "Product B", Decimal("39.90"), ACCESSORIES)
    catalog.add_product("sku-003", "Product C", Decimal("19.90"), "books")
    catalog.add_product("sku-004", "Product D", Decimal("1500.00"), "electronics")
    catalog.add_product("sku-005", "Product E", Decimal("5.00"), ACCESSORIES)
    return catalog
