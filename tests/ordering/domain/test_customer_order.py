"""Tests for the CustomerOrder snapshot."""

from catalog.book.book import Book
from ordering.cart.cart import Cart
from ordering.order.order import CustomerOrder, CustomerOrderStatus


def _make_cart():
    cart = Cart(customer_id="cust-001")
    cart.add_item(Book(isbn="isbn-1", title="First", price=12.0, category="Art", quantity=5), 2)
    cart.add_item(Book(isbn="isbn-2", title="Second", price=30.0, category="Art", quantity=5), 1)
    return cart


class TestFromCart:
    def test_snapshot(self):
        order = CustomerOrder.from_cart("ORD-000001", _make_cart())

        assert order.id == "ORD-000001"
        assert order.customer_id == "cust-001"
        assert order.status == CustomerOrderStatus.COMPLETED.value
        assert order.placed_at is not None
        assert order.total_amount == 54.0
        assert [(item.isbn, item.quantity) for item in order.items] == [("isbn-1", 2), ("isbn-2", 1)]
        assert order.items[0].line_total == 24.0

    def test_total_equals_sum_of_lines(self):
        order = CustomerOrder.from_cart("ORD-000001", _make_cart())
        assert order.total_amount == sum(item.line_total for item in order.items)

    def test_later_cart_changes_do_not_affect_order(self):
        cart = _make_cart()
        order = CustomerOrder.from_cart("ORD-000001", cart)

        cart.clear()
        assert len(order.items) == 2
        assert order.total_amount == 54.0
