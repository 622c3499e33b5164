from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timedelta, timezone

from order_pricing.catalog import default_catalog
from order_pricing.discounts import DiscountEngine
from order_pricing.orders import NotFoundError, OrderService
from order_pricing.payload import PayloadError, parse_items
from order_pricing.store import QuoteStore
from order_pricing.summary import format_order_summary


class ShiftedClock:
    """Wall clock that can be pushed forward, to demo quote expiry."""

    def __init__(self) -> None:
        self.offset = timedelta()

    def __call__(self) -> datetime:
        return datetime.now(timezone.utc) + self.offset

    def advance(self, minutes: float) -> None:
        self.offset += timedelta(minutes=minutes)


def _item(value: str) -> dict:
    sku, sep, qty = value.rpartition(":")
    if not sep:
        return {"productId": value, "quantity": 1}
    try:
        return {"productId": sku, "quantity": int(qty)}
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid quantity in {value!r}, expected SKU:QTY")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Price a cart, optionally through a quote, and print the summary.")
    p.add_argument("--item", dest="items", type=_item, action="append", default=[], metavar="SKU:QTY")
    p.add_argument("--quote", action="store_true", help="Create a quote and finalize it")
    p.add_argument(
        "--finalize-after",
        type=float,
        default=0,
        metavar="MINUTES",
        help="Simulated minutes between quote creation and finalization (implies --quote)",
    )
    p.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = p.parse_args()

    catalog = default_catalog()
    clock = ShiftedClock()
    service = OrderService(catalog, DiscountEngine(), QuoteStore(clock=clock))

    try:
        items = parse_items(args.items or [{"productId": "sku-001", "quantity": 1}])
        if args.quote or args.finalize_after:
            result = service.create_quote(items)
            clock.advance(args.finalize_after)
            order = service.finalize_order(result.quote_id)
        else:
            order = service.calculate_order(items)
    except PayloadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except NotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    summary = format_order_summary(order, catalog)
    print("\n=== RESULT ===")
    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    else:
        for line in summary["itemsSummary"]:
            print(f"{line['productId']} x{line['quantity']}: {line['subtotal']} -> {line['total']} {line['discountsApplied']}")
        for d in summary["discountsDetail"]:
            print(f"{d['code']}: -{d['amount']}")
        print("total:", summary["orderSummary"]["totalAfterDiscounts"], order.currency)
    return 0


if __name__ == "__main__":
    sys.exit(main())
