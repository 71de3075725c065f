"""Shopping Cart aggregate — one cart per customer identity.

Items are unique by isbn and keep a snapshot of the book's title and price
taken when the line is added or its quantity changes. ``total_items`` and
``total_price`` are computed from the item list on every read, so they can
never drift from it.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from catalog.book.book import Book
from shared.domain import bookstore
from shared.errors import InsufficientStock, NotFound


@bookstore.entity(part_of="Cart")
class CartItem:
    isbn = String(required=True, max_length=20)
    title = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)


@bookstore.aggregate
class Cart:
    customer_id = Identifier(identifier=True, required=True)
    items = HasMany(CartItem)
    updated_at = DateTime()

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> float:
        return round(sum(item.line_total for item in self.items), 2)

    def item_for(self, isbn: str) -> CartItem | None:
        return next((item for item in self.items if item.isbn == isbn), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, book: Book, quantity: int) -> None:
        """Add copies of a book, merging with an existing line for the same isbn."""
        existing = self.item_for(book.isbn)
        requested = quantity + (existing.quantity if existing else 0)
        if requested > book.quantity:
            raise InsufficientStock(isbn=book.isbn, available=book.quantity, requested=requested)

        now = datetime.now(UTC)

        if existing:
            existing.quantity = requested
            existing.title = book.title
            existing.unit_price = book.price
        else:
            self.add_items(
                CartItem(isbn=book.isbn, title=book.title, unit_price=book.price, quantity=quantity, added_at=now)
            )

        self.updated_at = now

    def update_quantity(self, book: Book, quantity: int) -> None:
        """Set the quantity of an existing line."""
        item = self.item_for(book.isbn)
        if item is None:
            raise NotFound("cart item", book.isbn)
        if quantity > book.quantity:
            raise InsufficientStock(isbn=book.isbn, available=book.quantity, requested=quantity)

        item.quantity = quantity
        item.title = book.title
        item.unit_price = book.price
        self.updated_at = datetime.now(UTC)

    def remove_item(self, isbn: str) -> bool:
        """Drop the line for ``isbn``. Returns False when there was none."""
        item = self.item_for(isbn)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        return True

    def clear(self) -> None:
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
