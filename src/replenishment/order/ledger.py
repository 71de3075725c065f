"""ReplenishmentLedger — publisher reorders and the only path that adds stock from them."""

from __future__ import annotations

import structlog

from catalog.book.store import CatalogStore
from replenishment.order.order import ReplenishmentOrder, ReplenishmentSource, ReplenishmentStatus
from shared import repository
from shared.errors import InvalidRequest
from shared.sequence import IdSequence

logger = structlog.get_logger(__name__)

replenishment_order_ids = IdSequence("PO", ReplenishmentOrder)


class ReplenishmentLedger:
    def __init__(self, catalog: CatalogStore, default_quantity: int = 20):
        self.catalog = catalog
        self.default_quantity = default_quantity

    def place(
        self,
        isbn: str,
        quantity: int | None = None,
        source: ReplenishmentSource = ReplenishmentSource.MANUAL,
    ) -> ReplenishmentOrder:
        quantity = self.default_quantity if quantity is None else quantity
        if quantity < 1:
            raise InvalidRequest("quantity", "Quantity must be at least 1")

        book = self.catalog.get(isbn)
        with replenishment_order_ids.allocate() as order_id:
            order = ReplenishmentOrder.create(order_id, book, quantity, source=source)
            repository.save(order)

        logger.info(
            "Replenishment order placed",
            order_id=order_id,
            isbn=isbn,
            quantity=quantity,
            source=order.source,
        )
        return self.get(order_id)

    def confirm(self, order_id: str) -> ReplenishmentOrder:
        """Confirm a pending order and add its quantity to the book's stock."""
        isbn = self.get(order_id).isbn

        with self.catalog.locks.hold(isbn):
            order = self.get(order_id)
            order.confirm()
            self.catalog.adjust_stock(isbn, order.quantity)
            repository.save(order)

        logger.info("Replenishment order confirmed", order_id=order_id, isbn=isbn, quantity=order.quantity)
        return self.get(order_id)

    def cancel(self, order_id: str) -> ReplenishmentOrder:
        isbn = self.get(order_id).isbn

        with self.catalog.locks.hold(isbn):
            order = self.get(order_id)
            order.cancel()
            repository.save(order)

        logger.info("Replenishment order cancelled", order_id=order_id, isbn=isbn)
        return self.get(order_id)

    def get(self, order_id: str) -> ReplenishmentOrder:
        return repository.load(ReplenishmentOrder, order_id, "replenishment order")

    def list(self, status: ReplenishmentStatus | str | None = None) -> list[ReplenishmentOrder]:
        if status is None:
            orders = repository.list_all(ReplenishmentOrder)
        else:
            orders = repository.list_all(ReplenishmentOrder, status=ReplenishmentStatus(status).value)
        return sorted(orders, key=lambda order: order.id)
