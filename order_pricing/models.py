from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List

CURRENCY = "BRL"
CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def round2(value: Decimal) -> Decimal:
    # half-up on the double of value * 100: 146.265 is 146.26499... and gives 146.26
    return (Decimal(math.floor(float(value) * 100 + 0.5)) / 100).quantize(CENTS)


@dataclass(slots=True)
class Product:
    id: str
    name: str
    unit_price: Decimal
    category: str


@dataclass(slots=True)
class LineItemRequest:
    product_id: str
    quantity: int


@dataclass(frozen=True, slots=True)
class Discount:
    code: str
    name: str
    basis: Decimal
    amount: Decimal
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class PricedLineItem:
    """
    Line item after catalog resolution.

    The orchestrator fills unit_price and quantity; subtotal, item_discounts
    and total are (re)computed in place by the discount engine.
    """

    product_id: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal = ZERO
    item_discounts: List[Discount] = field(default_factory=list)
    total: Decimal = ZERO


@dataclass(slots=True)
class Order:
    items: List[PricedLineItem]
    discounts: List[Discount]
    total: Decimal
    currency: str = CURRENCY


@dataclass(frozen=True, slots=True)
class Quote:
    id: str
    order: Order
    expiration: datetime
