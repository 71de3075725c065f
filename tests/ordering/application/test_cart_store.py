"""Tests for CartStore — per-customer carts against live catalog stock."""

import pytest
from shared.errors import InsufficientStock, InvalidRequest, NotFound


@pytest.fixture()
def carts(bookstore):
    return bookstore.carts


class TestGetCart:
    def test_unknown_customer_gets_empty_cart(self, carts):
        cart = carts.get("cust-new")
        assert cart.customer_id == "cust-new"
        assert len(cart.items) == 0

    def test_carts_are_isolated_per_customer(self, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 2)

        assert carts.get("cust-1").total_items == 2
        assert carts.get("cust-2").total_items == 0


class TestAddItem:
    def test_add_item(self, carts, add_book):
        add_book()
        cart = carts.add_item("cust-1", "978-0-00-000001-1", 2)

        assert cart.total_items == 2
        assert cart.total_price == 20.0
        assert carts.get("cust-1").total_items == 2

    def test_default_quantity_is_one(self, carts, add_book):
        add_book()
        assert carts.add_item("cust-1", "978-0-00-000001-1").total_items == 1

    def test_missing_book(self, carts):
        with pytest.raises(NotFound):
            carts.add_item("cust-1", "missing", 1)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, carts, add_book, quantity):
        add_book()
        with pytest.raises(InvalidRequest):
            carts.add_item("cust-1", "978-0-00-000001-1", quantity)

    def test_over_stock_leaves_cart_unchanged(self, carts, add_book):
        add_book(quantity=3)
        carts.add_item("cust-1", "978-0-00-000001-1", 2)

        with pytest.raises(InsufficientStock):
            carts.add_item("cust-1", "978-0-00-000001-1", 2)
        assert carts.get("cust-1").total_items == 2

    def test_add_does_not_reserve_stock(self, bookstore, carts, add_book):
        add_book(quantity=3)
        carts.add_item("cust-1", "978-0-00-000001-1", 3)
        carts.add_item("cust-2", "978-0-00-000001-1", 3)

        assert bookstore.catalog.get("978-0-00-000001-1").quantity == 3


class TestUpdateQuantity:
    def test_update_quantity(self, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        cart = carts.update_quantity("cust-1", "978-0-00-000001-1", 5)
        assert cart.items[0].quantity == 5

    def test_zero_removes_line(self, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        cart = carts.update_quantity("cust-1", "978-0-00-000001-1", 0)
        assert len(cart.items) == 0

    def test_missing_line(self, carts, add_book):
        add_book()
        with pytest.raises(NotFound) as exc:
            carts.update_quantity("cust-1", "978-0-00-000001-1", 2)
        assert exc.value.entity == "cart item"

    def test_above_current_stock(self, bookstore, carts, add_book):
        add_book(quantity=5)
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        bookstore.catalog.set_stock("978-0-00-000001-1", 2)

        with pytest.raises(InsufficientStock) as exc:
            carts.update_quantity("cust-1", "978-0-00-000001-1", 3)
        assert exc.value.available == 2

    def test_book_deleted_after_adding(self, bookstore, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        bookstore.catalog.delete("978-0-00-000001-1")

        with pytest.raises(InsufficientStock) as exc:
            carts.update_quantity("cust-1", "978-0-00-000001-1", 2)
        assert exc.value.available == 0


class TestRemoveAndClear:
    def test_remove_item(self, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        assert len(carts.remove_item("cust-1", "978-0-00-000001-1").items) == 0

    def test_remove_absent_item_is_not_an_error(self, carts, add_book):
        add_book()
        carts.add_item("cust-1", "978-0-00-000001-1", 1)
        cart = carts.remove_item("cust-1", "isbn-not-in-cart")
        assert cart.total_items == 1

    def test_clear(self, carts, add_book):
        add_book(isbn="isbn-1")
        add_book(isbn="isbn-2")
        carts.add_item("cust-1", "isbn-1", 1)
        carts.add_item("cust-1", "isbn-2", 1)

        cart = carts.clear("cust-1")
        assert len(cart.items) == 0
        assert len(carts.get("cust-1").items) == 0

    def test_remove_for_unknown_customers_keeps_no_locks(self, carts):
        for number in range(1000):
            carts.remove_item(f"cust-{number}", "isbn-1")

        assert carts.locks._locks == {}
        assert len(carts.get("cust-0").items) == 0
