"""Domain events raised by the Book aggregate.

Events are immutable facts. They are stored with the book when the
repository commits it, and handlers in other contexts (replenishment) react to
them on that same commit.
"""

from protean.fields import DateTime, Integer, String

from shared.domain import bookstore


@bookstore.event(part_of="Book")
class StockAdjusted:
    """Stock for a book changed by ``delta``."""

    __version__ = 1

    isbn = String(required=True)
    delta = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    adjusted_at = DateTime(required=True)


@bookstore.event(part_of="Book")
class LowStockDetected:
    """Stock fell from above the reorder threshold to at or below it."""

    __version__ = 1

    isbn = String(required=True)
    title = String(required=True)
    publisher = String()
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    threshold = Integer(required=True)
    detected_at = DateTime(required=True)
