"""Validation of raw request payloads before they reach OrderService."""

from __future__ import annotations

from typing import Any, List

from order_pricing.models import LineItemRequest
from order_pricing.orders import OrderError

ITEMS_REQUIRED = "Payload is invalid. 'items' array is required and must not be empty."
ITEM_INVALID = "Payload is invalid. Each item must have a valid 'productId' and a 'quantity' greater than 0."
QUOTE_ID_REQUIRED = "Payload is invalid. A 'quoteId' string is required."


class PayloadError(OrderError, ValueError):
    pass


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def parse_items(items: Any) -> List[LineItemRequest]:
    if not isinstance(items, list) or not items:
        raise PayloadError(ITEMS_REQUIRED)

    parsed: List[LineItemRequest] = []
    for item in items:
        if not isinstance(item, dict):
            raise PayloadError(ITEM_INVALID)
        product_id = item.get("productId")
        quantity = item.get("quantity")
        if not isinstance(product_id, str) or not product_id or not _is_positive_int(quantity):
            raise PayloadError(ITEM_INVALID)
        parsed.append(LineItemRequest(product_id=product_id, quantity=quantity))
    return parsed


def parse_quote_id(quote_id: Any) -> str:
    if not isinstance(quote_id, str) or not quote_id:
        raise PayloadError(QUOTE_ID_REQUIRED)
    return quote_id
