"""CartStore — per-customer carts kept in the domain's cart repository.

Mutations for one customer are serialized behind that customer's lock.
Stock checks read the catalog at call time and are advisory only; checkout
re-validates every line.
"""

import structlog

from catalog.book.store import CatalogStore
from ordering.cart.cart import Cart
from shared import repository
from shared.errors import InsufficientStock, InvalidRequest, NotFound
from shared.locking import KeyedLocks

logger = structlog.get_logger(__name__)

cart_locks = KeyedLocks("cart")


class CartStore:
    def __init__(self, catalog: CatalogStore, locks: KeyedLocks | None = None):
        self.catalog = catalog
        self.locks = locks or cart_locks

    def get(self, customer_id: str) -> Cart:
        """Return the customer's cart, or a new empty one."""
        return repository.find(Cart, customer_id) or Cart(customer_id=customer_id)

    def add_item(self, customer_id: str, isbn: str, quantity: int = 1) -> Cart:
        if quantity < 1:
            raise InvalidRequest("quantity", "Quantity must be at least 1")

        with self.locks.hold(customer_id):
            book = self.catalog.get(isbn)
            cart = self.get(customer_id)
            cart.add_item(book, quantity)
            repository.save(cart)

        logger.info("Item added to cart", customer_id=customer_id, isbn=isbn, quantity=quantity)
        return self.get(customer_id)

    def update_quantity(self, customer_id: str, isbn: str, quantity: int) -> Cart:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            return self.remove_item(customer_id, isbn)

        with self.locks.hold(customer_id):
            cart = self.get(customer_id)
            if cart.item_for(isbn) is None:
                raise NotFound("cart item", isbn)

            book = self.catalog.find(isbn)
            if book is None:
                raise InsufficientStock(isbn=isbn, available=0, requested=quantity)

            cart.update_quantity(book, quantity)
            repository.save(cart)

        logger.info("Cart quantity updated", customer_id=customer_id, isbn=isbn, quantity=quantity)
        return self.get(customer_id)

    def remove_item(self, customer_id: str, isbn: str) -> Cart:
        with self.locks.hold(customer_id):
            cart = self.get(customer_id)
            if cart.remove_item(isbn):
                repository.save(cart)
                logger.info("Item removed from cart", customer_id=customer_id, isbn=isbn)

        return self.get(customer_id)

    def clear(self, customer_id: str) -> Cart:
        with self.locks.hold(customer_id):
            cart = self.get(customer_id)
            cart.clear()
            repository.save(cart)

        logger.info("Cart cleared", customer_id=customer_id)
        return self.get(customer_id)
