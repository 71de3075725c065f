"""OrderHistory — append-only record of completed customer orders."""

from __future__ import annotations

import structlog

from ordering.cart.cart import Cart
from ordering.order.order import CustomerOrder
from shared import repository
from shared.errors import AlreadyExists
from shared.sequence import IdSequence

logger = structlog.get_logger(__name__)

order_ids = IdSequence("ORD", CustomerOrder)


class OrderHistory:
    def record(self, cart: Cart) -> CustomerOrder:
        """Snapshot ``cart`` into a new order under the next order id."""
        with order_ids.allocate() as order_id:
            order = CustomerOrder.from_cart(order_id, cart)
            self.append(order)
        return self.get(order_id)

    def append(self, order: CustomerOrder) -> None:
        if repository.find(CustomerOrder, order.id) is not None:
            raise AlreadyExists("order", order.id)
        repository.save(order)
        logger.info(
            "Customer order recorded",
            order_id=order.id,
            customer_id=order.customer_id,
            total_amount=order.total_amount,
        )

    def get(self, order_id: str) -> CustomerOrder:
        return repository.load(CustomerOrder, order_id, "order")

    def list(self) -> list[CustomerOrder]:
        return sorted(repository.list_all(CustomerOrder), key=lambda order: order.id)

    def list_for_customer(self, customer_id: str) -> list[CustomerOrder]:
        orders = repository.list_all(CustomerOrder, customer_id=customer_id)
        return sorted(orders, key=lambda order: order.id)
