from decimal import Decimal

from order_pricing.catalog import ACCESSORIES, default_catalog


def test_find_product_by_id():
    product = default_catalog().find_by_id("sku-001")

    assert product is not None
    assert product.id == "sku-001"
    assert product.name == "Product A"
    assert product.unit_price == Decimal("79.90")


def test_unknown_product_id():
    assert default_catalog().find_by_id("non-existent-sku") is None


def test_default_catalog_accessories():
    catalog = default_catalog()

    assert sorted(p.id for p in catalog.products.values() if p.category == ACCESSORIES) == ["sku-002", "sku-005"]
