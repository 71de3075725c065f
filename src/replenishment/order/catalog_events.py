"""Inbound catalog event handler — the auto-replenish rule.

Listens for LowStockDetected, raised by the Book aggregate whenever a stock
change moves a book from above its threshold to at or below it, and places
one pending publisher order for the configured reorder quantity.

The handler runs on the commit that saved the stock change. That change is
already stored when the handler runs, so a reorder that cannot be placed is
logged rather than raised back into the checkout or admin edit that caused it.
"""

import structlog
from protean.utils.mixins import handle

from catalog.book.events import LowStockDetected
from catalog.book.store import CatalogStore
from replenishment.order.ledger import ReplenishmentLedger
from replenishment.order.order import ReplenishmentOrder, ReplenishmentSource
from shared.config import get_settings
from shared.domain import bookstore
from shared.errors import BookstoreError

logger = structlog.get_logger(__name__)


@bookstore.event_handler(part_of=ReplenishmentOrder, stream_category="bookstore::book")
class CatalogReplenishmentEventHandler:
    """Reacts to catalog stock events by placing publisher reorders."""

    @handle(LowStockDetected)
    def on_low_stock_detected(self, event: LowStockDetected) -> None:
        reorder_quantity = get_settings().reorder_quantity
        logger.info(
            "Low stock detected, placing replenishment order",
            isbn=event.isbn,
            new_quantity=event.new_quantity,
            threshold=event.threshold,
            reorder_quantity=reorder_quantity,
        )

        ledger = ReplenishmentLedger(CatalogStore(), default_quantity=reorder_quantity)
        try:
            ledger.place(event.isbn, source=ReplenishmentSource.AUTOMATIC)
        except BookstoreError as exc:
            logger.error("Automatic replenishment order not placed", isbn=event.isbn, kind=exc.kind, error=exc.message)
