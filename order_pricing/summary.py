from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from order_pricing.catalog import ProductCatalog
from order_pricing.models import Discount, Order, round2

UNKNOWN_PRODUCT = "Unknown Product"


def _discount_detail(discount: Discount) -> Dict[str, Any]:
    return {
        "code": discount.code,
        "name": discount.name,
        "basis": str(discount.basis),
        "amount": str(discount.amount),
        "metadata": dict(discount.metadata),
    }


def format_order_summary(order: Order, catalog: ProductCatalog) -> Dict[str, Any]:
    """
    Shape an order for display: totals, one entry per item (with the product
    name and the names of item-level discounts) and the cart-level discounts.

    Amounts are rendered as strings so the output is JSON-safe without
    losing cents.
    """
    subtotal = Decimal("0.00")
    items_summary = []
    for item in order.items:
        product = catalog.find_by_id(item.product_id)
        subtotal = round2(subtotal + item.subtotal)
        items_summary.append(
            {
                "productId": item.product_id,
                "name": product.name if product else UNKNOWN_PRODUCT,
                "quantity": item.quantity,
                "unitPrice": str(item.unit_price),
                "subtotal": str(item.subtotal),
                "discountsApplied": [d.name for d in item.item_discounts],
                "total": str(item.total),
            }
        )

    return {
        "orderSummary": {
            "currency": order.currency,
            "subtotal": str(subtotal),
            "totalDiscounts": str(round2(subtotal - order.total)),
            "totalAfterDiscounts": str(order.total),
        },
        "itemsSummary": items_summary,
        "discountsDetail": [_discount_detail(d) for d in order.discounts],
    }
