"""Checkout Coordinator — turns a customer's cart into a CustomerOrder.

Flow (each step a hard gate; a failure leaves no partial effect):
    1. Payment format check                      → InvalidPayment
    2. Cart must have items                      → EmptyCart
    3. Re-validate stock for every line          → InsufficientStock
    4. Deduct stock for all lines at once        → StockRace
    5. Auto-replenish lines that crossed their threshold (LowStockDetected)
    6. Snapshot the cart into a CustomerOrder under the next order id
    7. Append the order to the order history
    8. Clear the cart

The order id is only taken once the deduction has succeeded, so a rejected
checkout never leaves a gap in the order numbering.

The customer's cart lock is taken first, then the isbn lock of every line,
so no other checkout, admin stock edit or replenishment confirmation can
touch those books between validation and deduction.
"""

import structlog

from catalog.book.store import CatalogStore
from ordering.cart.cart import Cart
from ordering.cart.store import CartStore
from ordering.checkout.payment import PaymentDescriptor, validate_payment
from ordering.order.history import OrderHistory
from ordering.order.order import CustomerOrder
from shared.errors import EmptyCart, InsufficientStock, InvalidStock, NotFound, StockRace

logger = structlog.get_logger(__name__)


class CheckoutCoordinator:
    def __init__(
        self,
        catalog: CatalogStore,
        carts: CartStore,
        history: OrderHistory,
        min_card_number_length: int = 13,
    ):
        self.catalog = catalog
        self.carts = carts
        self.history = history
        self.min_card_number_length = min_card_number_length

    def submit(self, customer_id: str, payment: PaymentDescriptor) -> CustomerOrder:
        validate_payment(payment, self.min_card_number_length)

        with self.carts.locks.hold(customer_id):
            cart = self.carts.get(customer_id)
            if not cart.items:
                raise EmptyCart(customer_id)

            with self.catalog.locks.hold(*(item.isbn for item in cart.items)):
                self._check_stock(cart)

                try:
                    self.catalog.adjust_stock_many([(item.isbn, -item.quantity) for item in cart.items])
                except InvalidStock as exc:
                    logger.warning("Stock changed during checkout", customer_id=customer_id, isbn=exc.isbn)
                    raise StockRace(isbn=exc.isbn) from exc
                except NotFound as exc:
                    logger.warning("Book removed during checkout", customer_id=customer_id, isbn=exc.identifier)
                    raise StockRace(isbn=exc.identifier) from exc

                order = self.history.record(cart)
                self.carts.clear(customer_id)

        logger.info(
            "Checkout completed",
            customer_id=customer_id,
            order_id=order.id,
            total_amount=order.total_amount,
            lines=len(order.items),
        )
        return order

    def _check_stock(self, cart: Cart) -> None:
        """Fail on the first line, in cart order, that current stock cannot cover."""
        for item in cart.items:
            book = self.catalog.find(item.isbn)
            available = book.quantity if book is not None else 0
            if available < item.quantity:
                raise InsufficientStock(isbn=item.isbn, available=available, requested=item.quantity)
