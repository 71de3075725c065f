"""ReplenishmentOrder — a reorder request placed with a book's publisher.

State Machine:
    PENDING → CONFIRMED  (stock is added by the ledger)
    PENDING → CANCELLED
Confirmed and Cancelled are terminal.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Date, Integer, String

from catalog.book.book import Book
from replenishment.order.events import (
    ReplenishmentOrderCancelled,
    ReplenishmentOrderConfirmed,
    ReplenishmentOrderPlaced,
)
from shared.domain import bookstore
from shared.errors import NotPending


class ReplenishmentStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class ReplenishmentSource(Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"


@bookstore.aggregate
class ReplenishmentOrder:
    isbn = String(required=True, max_length=20)
    book_title = String(required=True, max_length=255)
    publisher = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    order_date = Date(required=True)
    status = String(choices=ReplenishmentStatus, default=ReplenishmentStatus.PENDING.value)
    source = String(choices=ReplenishmentSource, default=ReplenishmentSource.MANUAL.value)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id, book: Book, quantity, source=ReplenishmentSource.MANUAL):
        order = cls(
            id=order_id,
            isbn=book.isbn,
            book_title=book.title,
            publisher=book.publisher,
            quantity=quantity,
            order_date=datetime.now(UTC).date(),
            status=ReplenishmentStatus.PENDING.value,
            source=ReplenishmentSource(source).value,
        )
        order.raise_(
            ReplenishmentOrderPlaced(
                order_id=order_id,
                isbn=order.isbn,
                publisher=order.publisher,
                quantity=order.quantity,
                source=order.source,
                order_date=order.order_date,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def _ensure_pending(self):
        if ReplenishmentStatus(self.status) != ReplenishmentStatus.PENDING:
            raise NotPending(order_id=self.id, status=self.status)

    def confirm(self):
        self._ensure_pending()
        self.status = ReplenishmentStatus.CONFIRMED.value
        self.raise_(
            ReplenishmentOrderConfirmed(
                order_id=self.id,
                isbn=self.isbn,
                quantity=self.quantity,
                confirmed_at=datetime.now(UTC),
            )
        )

    def cancel(self):
        self._ensure_pending()
        self.status = ReplenishmentStatus.CANCELLED.value
        self.raise_(ReplenishmentOrderCancelled(order_id=self.id, isbn=self.isbn, cancelled_at=datetime.now(UTC)))
