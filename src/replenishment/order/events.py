"""Domain events for the ReplenishmentOrder aggregate."""

from protean.fields import Date, DateTime, Identifier, Integer, String

from shared.domain import bookstore


@bookstore.event(part_of="ReplenishmentOrder")
class ReplenishmentOrderPlaced:
    """A reorder was placed with the book's publisher."""

    __version__ = 1

    order_id = Identifier(required=True)
    isbn = String(required=True)
    publisher = String()
    quantity = Integer(required=True)
    source = String(required=True)
    order_date = Date(required=True)


@bookstore.event(part_of="ReplenishmentOrder")
class ReplenishmentOrderConfirmed:
    """The publisher delivered; the order's quantity joins the book's stock."""

    __version__ = 1

    order_id = Identifier(required=True)
    isbn = String(required=True)
    quantity = Integer(required=True)
    confirmed_at = DateTime(required=True)


@bookstore.event(part_of="ReplenishmentOrder")
class ReplenishmentOrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    isbn = String(required=True)
    cancelled_at = DateTime(required=True)
