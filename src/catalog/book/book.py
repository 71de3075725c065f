"""Book aggregate — the authoritative record for one catalogue entry.

Stock Model:
    quantity:  copies currently in stock, never negative
    threshold: stock level at or below which the book is reordered from its publisher

``adjust_stock`` is the only method that changes ``quantity``. It raises
StockAdjusted on every change and LowStockDetected when the change moves the
quantity from above the threshold to at or below it.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Float, Integer, List, String

from catalog.book.events import LowStockDetected, StockAdjusted
from shared.domain import bookstore
from shared.errors import InvalidStock


class BookCategory(Enum):
    SCIENCE = "Science"
    ART = "Art"
    RELIGION = "Religion"
    HISTORY = "History"
    GEOGRAPHY = "Geography"


@bookstore.aggregate
class Book:
    isbn = String(identifier=True, required=True, max_length=20)
    title = String(required=True, max_length=255)
    authors = List(content_type=String)
    publisher = String(max_length=255, default="")
    publication_year = Integer()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, choices=BookCategory)
    quantity = Integer(default=0, min_value=0)
    threshold = Integer(default=5, min_value=0)
    image_url = String(max_length=500)

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.threshold

    def adjust_stock(self, delta: int) -> None:
        """Change stock by ``delta``, rejecting any result below zero."""
        previous = self.quantity
        new_quantity = previous + delta
        if new_quantity < 0:
            raise InvalidStock(isbn=self.isbn, quantity=previous, delta=delta)

        self.quantity = new_quantity
        now = datetime.now(UTC)

        self.raise_(
            StockAdjusted(
                isbn=self.isbn,
                delta=delta,
                previous_quantity=previous,
                new_quantity=new_quantity,
                adjusted_at=now,
            )
        )

        if previous > self.threshold >= new_quantity:
            self.raise_(
                LowStockDetected(
                    isbn=self.isbn,
                    title=self.title,
                    publisher=self.publisher,
                    previous_quantity=previous,
                    new_quantity=new_quantity,
                    threshold=self.threshold,
                    detected_at=now,
                )
            )
