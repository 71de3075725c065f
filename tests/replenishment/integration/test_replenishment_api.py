"""Integration tests for replenishment order endpoints via TestClient."""

import pytest
from app import create_app
from fastapi.testclient import TestClient


@pytest.fixture()
def client(bookstore, add_book):
    add_book(isbn="isbn-1", quantity=3, threshold=5)
    return TestClient(create_app(bookstore))


def _place(client, isbn="isbn-1", quantity=20):
    """Helper: POST /replenishment-orders and return the order."""
    response = client.post("/replenishment-orders", json={"isbn": isbn, "quantity": quantity})
    assert response.status_code == 201
    return response.json()


class TestPlaceEndpoint:
    def test_place_order(self, client):
        order = _place(client)
        assert order["id"] == "PO-000001"
        assert order["status"] == "Pending"
        assert order["source"] == "Manual"
        assert order["book_title"] == "Test Book"

    def test_place_with_default_quantity(self, client):
        response = client.post("/replenishment-orders", json={"isbn": "isbn-1"})
        assert response.status_code == 201
        assert response.json()["quantity"] == 20

    def test_place_for_unknown_book(self, client):
        response = client.post("/replenishment-orders", json={"isbn": "missing", "quantity": 5})
        assert response.status_code == 404

    def test_place_zero_quantity(self, client):
        response = client.post("/replenishment-orders", json={"isbn": "isbn-1", "quantity": 0})
        assert response.status_code == 422


class TestTransitionEndpoints:
    def test_confirm(self, client, bookstore):
        order = _place(client)
        response = client.put(f"/replenishment-orders/{order['id']}/confirm")
        assert response.status_code == 200
        assert response.json()["status"] == "Confirmed"
        assert bookstore.catalog.get("isbn-1").quantity == 23

    def test_confirm_twice(self, client, bookstore):
        order = _place(client)
        client.put(f"/replenishment-orders/{order['id']}/confirm")

        response = client.put(f"/replenishment-orders/{order['id']}/confirm")
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "NotPending"
        assert body["status"] == "Confirmed"
        assert bookstore.catalog.get("isbn-1").quantity == 23

    def test_cancel(self, client):
        order = _place(client)
        response = client.put(f"/replenishment-orders/{order['id']}/cancel")
        assert response.status_code == 200
        assert response.json()["status"] == "Cancelled"

    def test_confirm_unknown_order(self, client):
        response = client.put("/replenishment-orders/PO-999999/confirm")
        assert response.status_code == 404


class TestListEndpoint:
    def test_list_with_status_filter(self, client):
        first = _place(client)
        _place(client)
        client.put(f"/replenishment-orders/{first['id']}/cancel")

        pending = client.get("/replenishment-orders", params={"status": "Pending"}).json()
        assert [order["id"] for order in pending] == ["PO-000002"]

        everything = client.get("/replenishment-orders").json()
        assert len(everything) == 2

    def test_unknown_status_filter(self, client):
        response = client.get("/replenishment-orders", params={"status": "Shipped"})
        assert response.status_code == 422
