"""Tests for the Cart aggregate — lines, snapshots and computed totals."""

import pytest
from catalog.book.book import Book
from ordering.cart.cart import Cart, CartItem
from protean.exceptions import ValidationError
from shared.errors import InsufficientStock, NotFound


def _make_book(isbn="isbn-1", price=10.0, quantity=10, title="Test Book"):
    return Book(isbn=isbn, title=title, price=price, category="Science", quantity=quantity)


def _make_cart():
    return Cart(customer_id="cust-001")


class TestCartItem:
    def test_line_total(self):
        item = CartItem(isbn="isbn-1", title="Test Book", unit_price=14.99, quantity=3)
        assert item.line_total == 44.97

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError) as exc:
            CartItem(isbn="isbn-1", title="Test Book", unit_price=1.0, quantity=0)
        assert "quantity" in exc.value.messages


class TestCartTotals:
    def test_empty_cart(self):
        cart = _make_cart()
        assert len(cart.items) == 0
        assert cart.total_items == 0
        assert cart.total_price == 0

    def test_totals_follow_items(self):
        cart = _make_cart()
        cart.add_item(_make_book("isbn-1", 12.0), 2)
        cart.add_item(_make_book("isbn-2", 30.0), 1)

        assert cart.total_items == 3
        assert cart.total_price == 54.0

    def test_total_price_is_rounded_to_cents(self):
        cart = _make_cart()
        cart.add_item(_make_book("isbn-1", 0.1), 3)
        cart.add_item(_make_book("isbn-2", 0.2), 1)

        assert cart.total_price == 0.5


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item(_make_book(), 2)

        assert len(cart.items) == 1
        assert cart.items[0].isbn == "isbn-1"
        assert cart.items[0].title == "Test Book"
        assert cart.items[0].unit_price == 10.0
        assert cart.updated_at is not None

    def test_same_book_merges_into_one_line(self):
        cart = _make_cart()
        cart.add_item(_make_book(), 1)
        cart.add_item(_make_book(), 2)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_merge_refreshes_price_snapshot(self):
        cart = _make_cart()
        cart.add_item(_make_book(price=10.0), 1)
        cart.add_item(_make_book(price=8.0, title="Test Book (2nd ed.)"), 1)

        assert cart.items[0].unit_price == 8.0
        assert cart.items[0].title == "Test Book (2nd ed.)"

    def test_more_than_stock_rejected(self):
        cart = _make_cart()
        with pytest.raises(InsufficientStock) as exc:
            cart.add_item(_make_book(quantity=2), 3)

        assert exc.value.available == 2
        assert exc.value.requested == 3
        assert len(cart.items) == 0

    def test_merged_quantity_checked_against_stock(self):
        cart = _make_cart()
        cart.add_item(_make_book(quantity=5), 3)
        with pytest.raises(InsufficientStock) as exc:
            cart.add_item(_make_book(quantity=5), 3)

        assert exc.value.requested == 6
        assert cart.items[0].quantity == 3


class TestUpdateQuantity:
    def test_update_quantity(self):
        cart = _make_cart()
        cart.add_item(_make_book(), 1)
        cart.update_quantity(_make_book(), 4)
        assert cart.items[0].quantity == 4

    def test_update_missing_line(self):
        cart = _make_cart()
        with pytest.raises(NotFound):
            cart.update_quantity(_make_book(), 1)

    def test_update_above_stock(self):
        cart = _make_cart()
        cart.add_item(_make_book(quantity=3), 1)
        with pytest.raises(InsufficientStock):
            cart.update_quantity(_make_book(quantity=3), 4)
        assert cart.items[0].quantity == 1


class TestRemoveAndClear:
    def test_remove_item(self):
        cart = _make_cart()
        cart.add_item(_make_book("isbn-1"), 1)
        cart.add_item(_make_book("isbn-2"), 1)

        assert cart.remove_item("isbn-1") is True
        assert [item.isbn for item in cart.items] == ["isbn-2"]

    def test_remove_absent_item(self):
        cart = _make_cart()
        cart.add_item(_make_book("isbn-1"), 1)
        assert cart.remove_item("isbn-9") is False
        assert len(cart.items) == 1

    def test_clear(self):
        cart = _make_cart()
        cart.add_item(_make_book("isbn-1"), 1)
        cart.add_item(_make_book("isbn-2"), 2)
        cart.clear()

        assert len(cart.items) == 0
        assert cart.total_items == 0
        assert cart.total_price == 0
