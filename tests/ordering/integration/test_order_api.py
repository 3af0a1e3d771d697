"""Integration tests for Order API endpoints via TestClient."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import cart_router, order_router
from ordering.order.order import Order
from protean import current_domain
from protean.core.unit_of_work import UnitOfWork
from shared.api import register_error_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    app.include_router(order_router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def order_id(customer):
    order = Order.place(
        cart_lines=[{"item_id": "item-a", "name": "Gift Box", "price": 1000.0, "quantity": 1}],
        **customer,
    )
    current_domain.repository_for(Order).add(order)
    return str(order.id)


class TestGetOrder:
    def test_get_order(self, client, order_id):
        body = client.get(f"/orders/{order_id}").json()
        assert body["order_id"] == order_id
        assert body["cart_items"][0]["name"] == "Gift Box"
        assert body["final_payable"] == 1000.0
        assert body["dispatched_at"] is None

    def test_unknown_order_returns_404(self, client):
        assert client.get("/orders/missing").status_code == 404


class TestListOrders:
    def test_lists_orders(self, client, order_id):
        body = client.get("/orders").json()
        assert [row["order_id"] for row in body] == [order_id]
        assert body[0]["item_count"] == 1

    def test_status_filter(self, client, order_id):
        assert client.get("/orders", params={"status": "dispatched"}).json() == []
        assert len(client.get("/orders", params={"status": "pending"}).json()) == 1

    def test_unknown_status_returns_400(self, client):
        assert client.get("/orders", params={"status": "shipped"}).status_code == 400


class TestDispatchEndpoint:
    def test_dispatch(self, client, order_id):
        response = client.put(
            f"/orders/{order_id}/dispatch",
            json={"payment_received": 500.0, "delivery_charges": 150.0, "discount_applied": 50.0},
        )
        assert response.status_code == 200

        body = client.get(f"/orders/{order_id}").json()
        assert body["status"] == "dispatched"
        assert body["final_payable"] == 1100.0
        assert body["dispatched_at"] is not None

    def test_zero_payment_returns_400(self, client, order_id):
        response = client.put(f"/orders/{order_id}/dispatch", json={"payment_received": 0})
        assert response.status_code == 400
        assert client.get(f"/orders/{order_id}").json()["status"] == "pending"

    def test_unknown_order_returns_404(self, client):
        response = client.put("/orders/missing/dispatch", json={"payment_received": 10})
        assert response.status_code == 404

    def test_store_failure_returns_503(self, client, order_id):
        with patch.object(UnitOfWork, "commit", side_effect=ConnectionError("write rejected")):
            response = client.put(f"/orders/{order_id}/dispatch", json={"payment_received": 10})
        assert response.status_code == 503
        assert response.json()["error"]["reason"] == "write rejected"


class TestExportEndpoint:
    def test_export_csv(self, client, order_id):
        client.put(f"/orders/{order_id}/dispatch", json={"payment_received": 1000.0})
        response = client.get("/orders/export")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "dispatched-orders-" in response.headers["content-disposition"]
        lines = response.text.strip().split("\n")
        assert lines[0].startswith("Order ID,Customer Name")
        assert lines[1].startswith(order_id)


class TestCheckoutEndpoint:
    def _cart(self, client):
        cart_id = client.post("/carts", json={"session_id": "sess-api"}).json()["cart_id"]
        client.post(f"/carts/{cart_id}/items", json={"item_id": "item-a", "name": "Gift Box", "price": 1000.0})
        return cart_id

    def test_checkout_creates_order(self, client, customer):
        cart_id = self._cart(client)
        response = client.post(f"/carts/{cart_id}/checkout", json=customer)
        assert response.status_code == 201
        order_id = response.json()["order_id"]
        assert client.get(f"/orders/{order_id}").json()["order_value"] == 1000.0

    def test_rejected_commit_returns_503(self, client, customer):
        cart_id = self._cart(client)
        with patch.object(UnitOfWork, "commit", side_effect=ConnectionError("db down")):
            response = client.post(f"/carts/{cart_id}/checkout", json=customer)
        assert response.status_code == 503
        assert response.json()["error"] == {"operation": "create order", "reason": "db down"}


class TestOrderStatsEndpoint:
    def test_counts_and_revenue(self, client, order_id):
        assert client.get("/orders/stats").json() == {
            "pending_orders": 1,
            "dispatched_orders": 0,
            "total_revenue": 0.0,
        }
        client.put(f"/orders/{order_id}/dispatch", json={"payment_received": 900.0})
        body = client.get("/orders/stats").json()
        assert body["pending_orders"] == 0
        assert body["dispatched_orders"] == 1
        assert body["total_revenue"] == 900.0
