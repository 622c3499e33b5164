from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from order_pricing.models import Quote

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuoteStore:
    """
    In-memory quotes keyed by id.

    Expiry is lazy: an expired quote is dropped the next time it is read
    (or by an explicit purge_expired call). Nothing sweeps in the background,
    so quotes that are never read again stay until the process exits.
    """

    def __init__(self, clock: Clock = utcnow) -> None:
        self.clock = clock
        self.quotes: Dict[str, Quote] = {}

    def __len__(self) -> int:
        return len(self.quotes)

    def __contains__(self, quote_id: object) -> bool:
        return quote_id in self.quotes

    def save(self, quote: Quote) -> None:
        self.quotes[quote.id] = quote

    def find_by_id(self, quote_id: str) -> Optional[Quote]:
        quote = self.quotes.get(quote_id)
        if quote is None:
            return None
        if quote.expiration > self.clock():
            return quote
        del self.quotes[quote_id]
        logger.info("quote expired: %s", quote_id)
        return None

    def purge_expired(self) -> int:
        now = self.clock()
        expired = [quote_id for quote_id, quote in self.quotes.items() if quote.expiration <= now]
        for quote_id in expired:
            del self.quotes[quote_id]
        if expired:
            logger.info("purged %d expired quotes", len(expired))
        return len(expired)
