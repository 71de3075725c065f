"""CustomerOrder — snapshot of a cart taken at checkout.

Orders are written once by checkout and never modified afterwards; the
aggregate exposes no mutating methods.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.cart import Cart
from shared.domain import bookstore


class CustomerOrderStatus(Enum):
    COMPLETED = "Completed"
    PROCESSING = "Processing"
    CANCELLED = "Cancelled"


@bookstore.entity(part_of="CustomerOrder")
class CustomerOrderItem:
    isbn = String(required=True, max_length=20)
    title = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    line_total = Float(required=True, min_value=0.0)


@bookstore.aggregate
class CustomerOrder:
    customer_id = Identifier(required=True)
    placed_at = DateTime(required=True)
    items = HasMany(CustomerOrderItem)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=CustomerOrderStatus, default=CustomerOrderStatus.COMPLETED.value)

    @classmethod
    def from_cart(cls, order_id: str, cart: Cart) -> "CustomerOrder":
        return cls(
            id=order_id,
            customer_id=cart.customer_id,
            placed_at=datetime.now(UTC),
            items=[
                CustomerOrderItem(
                    isbn=item.isbn,
                    title=item.title,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in cart.items
            ],
            total_amount=cart.total_price,
            status=CustomerOrderStatus.COMPLETED.value,
        )
