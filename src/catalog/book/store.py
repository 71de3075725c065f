"""CatalogStore — owns every Book record and the stock gate.

All writes to a book hold that book's isbn lock. Stock changes from every
caller (admin edits, checkout deduction, replenishment confirmation) go
through ``adjust_stock_many`` so the non-negative invariant and the
low-stock signal live in exactly one place.
"""

from __future__ import annotations

import structlog
from protean.exceptions import ValidationError

from catalog.book.book import Book
from shared import repository
from shared.errors import AlreadyExists, InvalidRequest
from shared.locking import KeyedLocks

logger = structlog.get_logger(__name__)

IMMUTABLE_FIELDS = frozenset({"isbn", "quantity"})
EDITABLE_FIELDS = frozenset(
    {"title", "authors", "publisher", "publication_year", "price", "category", "threshold", "image_url"}
)

book_locks = KeyedLocks("book")


def _invalid_request(exc: ValidationError) -> InvalidRequest:
    field, messages = next(iter(exc.messages.items()))
    return InvalidRequest(field, "; ".join(str(message) for message in messages))


class CatalogStore:
    def __init__(self, locks: KeyedLocks | None = None):
        self.locks = locks or book_locks

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get(self, isbn: str) -> Book:
        return repository.load(Book, isbn, "book")

    def find(self, isbn: str) -> Book | None:
        return repository.find(Book, isbn)

    def list(self) -> list[Book]:
        return sorted(repository.list_all(Book), key=lambda book: book.isbn)

    # -------------------------------------------------------------------
    # Record management
    # -------------------------------------------------------------------
    def create(self, **fields) -> Book:
        """Add a new book; ``fields`` are the Book's attributes."""
        try:
            book = Book(**fields)
        except ValidationError as exc:
            raise _invalid_request(exc) from exc

        with self.locks.hold(book.isbn):
            if self.find(book.isbn) is not None:
                raise AlreadyExists("book", book.isbn)
            repository.save(book)

        logger.info("Book added to catalog", isbn=book.isbn, quantity=book.quantity, threshold=book.threshold)
        return self.get(book.isbn)

    def set_fields(self, isbn: str, **fields) -> Book:
        """Update non-stock fields of a book."""
        forbidden = IMMUTABLE_FIELDS.intersection(fields)
        if forbidden:
            raise InvalidRequest(sorted(forbidden)[0], "isbn and quantity cannot be changed through a field update")

        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise InvalidRequest(sorted(unknown)[0], "Unknown book field")

        with self.locks.hold(isbn):
            book = self.get(isbn)
            try:
                for name, value in fields.items():
                    setattr(book, name, value)
            except ValidationError as exc:
                raise _invalid_request(exc) from exc
            repository.save(book)

        logger.info("Book fields updated", isbn=isbn, fields=sorted(fields))
        return self.get(isbn)

    def delete(self, isbn: str) -> None:
        with self.locks.hold(isbn):
            repository.remove(self.get(isbn))

        logger.info("Book removed from catalog", isbn=isbn)

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def adjust_stock(self, isbn: str, delta: int) -> Book:
        """Change one book's stock by ``delta``."""
        return self.adjust_stock_many([(isbn, delta)])[0]

    def set_stock(self, isbn: str, quantity: int) -> Book:
        """Admin edit: set the absolute stock level, routed through the stock gate."""
        with self.locks.hold(isbn):
            book = self.get(isbn)
            return self.adjust_stock(isbn, quantity - book.quantity)

    def adjust_stock_many(self, changes: list[tuple[str, int]]) -> list[Book]:
        """Apply several stock changes as one all-or-nothing unit.

        Every change is applied to a loaded copy first; nothing is saved
        unless all of them pass the stock gate. Returns the updated books in
        the order of ``changes``.

        Saving a book dispatches its events to their handlers (the
        auto-replenish rule) while the isbn locks are still held. A failing
        handler cannot undo a saved stock change, so handlers must not raise
        for conditions they can report instead.
        """
        with self.locks.hold(*(isbn for isbn, _ in changes)):
            working: dict[str, Book] = {}
            for isbn, delta in changes:
                book = working[isbn] if isbn in working else repository.load(Book, isbn, "book")
                book.adjust_stock(delta)
                working[isbn] = book

            for book in working.values():
                for event in book._events:
                    logger.debug("Catalog event", event_type=type(event).__name__, isbn=book.isbn)
                repository.save(book)

            return [self.get(isbn) for isbn, _ in changes]
