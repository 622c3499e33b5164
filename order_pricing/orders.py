from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, List, Optional, Sequence

from order_pricing.catalog import ProductCatalog
from order_pricing.discounts import DiscountEngine
from order_pricing.models import LineItemRequest, Order, PricedLineItem, Product, Quote
from order_pricing.store import Clock, QuoteStore

logger = logging.getLogger(__name__)

QUOTE_TTL = timedelta(minutes=30)


class OrderError(Exception):
    pass


class NotFoundError(OrderError, LookupError):
    def __init__(self, message: str, identifier: str):
        super().__init__(message)
        self.identifier = identifier


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str):
        super().__init__(f"Product with ID {product_id} not found.", product_id)


class InvalidQuoteError(NotFoundError):
    """Unknown quote id, or one that already expired (the store drops those)."""

    def __init__(self, quote_id: str):
        super().__init__(f"Invalid or expired quote with ID {quote_id}. Please generate a new quote.", quote_id)


@dataclass(frozen=True, slots=True)
class QuoteResult:
    quote_id: str
    order: Order


class OrderService:
    def __init__(
        self,
        catalog: ProductCatalog,
        engine: DiscountEngine,
        quotes: QuoteStore,
        clock: Optional[Clock] = None,
        quote_ttl: timedelta = QUOTE_TTL,
    ):
        self.catalog = catalog
        self.engine = engine
        self.quotes = quotes
        # same clock as the store unless told otherwise, so expirations compare consistently
        self.clock = clock or quotes.clock
        self.quote_ttl = quote_ttl

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def _resolve_items(self, items: Sequence[LineItemRequest]) -> tuple[List[PricedLineItem], Dict[str, Product]]:
        priced: List[PricedLineItem] = []
        products: Dict[str, Product] = {}
        for item in items:
            product = self.catalog.find_by_id(item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)
            products[product.id] = product
            priced.append(PricedLineItem(product_id=item.product_id, unit_price=product.unit_price, quantity=item.quantity))
        return priced, products

    def calculate_order(self, items: Sequence[LineItemRequest]) -> Order:
        try:
            priced, products = self._resolve_items(items)
        except ProductNotFoundError as e:
            self.log(f"[calculate] FAILED: {e}")
            raise

        order = self.engine.calculate_discounts(priced, products)
        self.log(
            f"[calculate] items={len(order.items)} discounts={[d.code for d in order.discounts]} total={order.total}"
        )
        return order

    def create_quote(self, items: Sequence[LineItemRequest]) -> QuoteResult:
        order = self.calculate_order(items)
        quote = Quote(id=str(uuid.uuid4()), order=order, expiration=self.clock() + self.quote_ttl)
        self.quotes.save(quote)
        self.log(f"[quote={quote.id}] created total={order.total} expires={quote.expiration.isoformat()}")
        return QuoteResult(quote_id=quote.id, order=order)

    def finalize_order(self, quote_id: str) -> Order:
        quote = self.quotes.find_by_id(quote_id)
        if quote is None:
            self.log(f"[quote={quote_id}] FINALIZE FAILED: invalid or expired")
            raise InvalidQuoteError(quote_id)

        self.log(f"[quote={quote_id}] finalized total={quote.order.total}")
        return quote.order
