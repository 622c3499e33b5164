from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Mapping, Optional, Sequence, Tuple

from order_pricing.catalog import ACCESSORIES
from order_pricing.models import ZERO, Discount, Order, PricedLineItem, Product, round2

logger = logging.getLogger(__name__)

CATEGORY_UNITS_THRESHOLD = 5
CATEGORY_RATE = Decimal("0.05")

# (min units, rate, code), highest tier first
VOLUME_TIERS: Tuple[Tuple[int, Decimal, str], ...] = (
    (50, Decimal("0.20"), "QTY_TIER_20PCT"),
    (20, Decimal("0.15"), "QTY_TIER_15PCT"),
    (10, Decimal("0.10"), "QTY_TIER_10PCT"),
)

# (min original subtotal, fixed amount, code), highest threshold first
CART_VALUE_TIERS: Tuple[Tuple[Decimal, Decimal, str], ...] = (
    (Decimal("2000"), Decimal("150.00"), "CART_VALUE_FIXED_150"),
    (Decimal("1000"), Decimal("50.00"), "CART_VALUE_FIXED_50"),
)


class DiscountEngine:
    """
    Prices a cart and applies the discount rules in a fixed order:

    1. item subtotals
    2. 5% category discount on accessories (cart-wide accessory units > 5)
    3. cart total from item totals
    4. volume tier on the running total, then fixed cart-value discount
       evaluated on the original (pre-discount) subtotal

    Every arithmetic step is rounded to cents. Items whose product is not in
    `products` are left out of the order.
    """

    def calculate_discounts(self, items: Sequence[PricedLineItem], products: Mapping[str, Product]) -> Order:
        priced: List[PricedLineItem] = []
        total_items = 0
        subtotal_original = ZERO
        accessories_units = 0

        for item in items:
            product = products.get(item.product_id)
            if product is None:
                logger.debug("skipping item without catalog entry: %s", item.product_id)
                continue

            item.subtotal = round2(item.unit_price * item.quantity)
            item.total = item.subtotal
            item.item_discounts = []

            subtotal_original = round2(subtotal_original + item.subtotal)
            total_items += item.quantity
            if product.category == ACCESSORIES:
                accessories_units += item.quantity
            priced.append(item)

        if accessories_units > CATEGORY_UNITS_THRESHOLD:
            for item in priced:
                self._apply_category_discount(item, products[item.product_id])

        total = ZERO
        for item in priced:
            total = round2(total + item.total)

        discounts: List[Discount] = []

        volume = self._volume_discount(total_items, total)
        if volume is not None:
            discounts.append(volume)
            total = round2(total - volume.amount)

        cart_value = self._cart_value_discount(subtotal_original)
        if cart_value is not None:
            discounts.append(cart_value)
            total = round2(total - cart_value.amount)

        logger.debug(
            "priced %d items: units=%d subtotal=%s discounts=%s total=%s",
            len(priced),
            total_items,
            subtotal_original,
            [d.code for d in discounts],
            total,
        )
        return Order(items=priced, discounts=discounts, total=total)

    def _apply_category_discount(self, item: PricedLineItem, product: Product) -> None:
        if product.category != ACCESSORIES:
            return
        amount = round2(item.subtotal * CATEGORY_RATE)
        item.item_discounts.append(
            Discount(
                code="CAT_ACC_5PCT",
                name="Categoria acessórios 5%",
                basis=item.subtotal,
                amount=amount,
                metadata={"category": ACCESSORIES, "threshold": CATEGORY_UNITS_THRESHOLD},
            )
        )
        item.total = round2(item.total - amount)

    def _volume_discount(self, total_items: int, current_total: Decimal) -> Optional[Discount]:
        for min_units, rate, code in VOLUME_TIERS:
            if total_items >= min_units:
                return Discount(
                    code=code,
                    name=f"Desconto por volume {int(rate * 100)}%",
                    basis=current_total,
                    amount=round2(current_total * rate),
                    metadata={"totalItems": total_items, "tier": f">={min_units}"},
                )
        return None

    def _cart_value_discount(self, subtotal_original: Decimal) -> Optional[Discount]:
        for threshold, amount, code in CART_VALUE_TIERS:
            if subtotal_original >= threshold:
                return Discount(
                    code=code,
                    name="Desconto por valor do carrinho",
                    basis=subtotal_original,
                    amount=amount,
                    metadata={"threshold": int(threshold)},
                )
        return None
