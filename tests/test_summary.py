import json
from decimal import Decimal

from order_pricing.models import LineItemRequest, Order, PricedLineItem
from order_pricing.summary import UNKNOWN_PRODUCT, format_order_summary


def test_summary_with_cart_discounts(service, catalog):
    order = service.calculate_order([LineItemRequest("sku-004", 1), LineItemRequest("sku-001", 15)])

    summary = format_order_summary(order, catalog)

    assert summary["orderSummary"] == {
        "currency": "BRL",
        "subtotal": "2698.50",
        "totalDiscounts": "419.85",
        "totalAfterDiscounts": "2278.65",
    }
    assert [d["code"] for d in summary["discountsDetail"]] == ["QTY_TIER_10PCT", "CART_VALUE_FIXED_150"]
    assert summary["itemsSummary"][0]["name"] == "Product D"
    # plain JSON, no Decimal left behind
    json.dumps(summary)


def test_summary_lists_item_discount_names(service, catalog):
    order = service.calculate_order(
        [LineItemRequest("sku-002", 3), LineItemRequest("sku-005", 3), LineItemRequest("sku-003", 1)]
    )

    items = {line["productId"]: line for line in format_order_summary(order, catalog)["itemsSummary"]}

    assert items["sku-002"]["discountsApplied"] == ["Categoria acessórios 5%"]
    assert items["sku-002"]["total"] == "113.71"
    assert items["sku-003"]["discountsApplied"] == []


def test_summary_unknown_product(catalog):
    order = Order(
        items=[
            PricedLineItem(
                product_id="sku-deleted",
                unit_price=Decimal("99.90"),
                quantity=1,
                subtotal=Decimal("99.90"),
                total=Decimal("99.90"),
            )
        ],
        discounts=[],
        total=Decimal("99.90"),
    )

    summary = format_order_summary(order, catalog)

    assert summary["itemsSummary"][0]["name"] == UNKNOWN_PRODUCT
    assert summary["orderSummary"]["totalDiscounts"] == "0.00"
