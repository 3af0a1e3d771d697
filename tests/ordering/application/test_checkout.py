"""Application tests for turning a cart into an order."""

from unittest.mock import patch

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart
from ordering.cart.management import CreateCart
from ordering.cart.session import CartSession
from ordering.cart.storage import KeyValueCartStorage
from ordering.order.checkout import PlaceOrder, checkout
from ordering.order.order import Order, OrderStatus
from protean import current_domain
from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import ValidationError
from shared.commands import process_write
from shared.exceptions import RemoteError


def _cart_with_items():
    cart_id = current_domain.process(CreateCart(session_id="sess-001"), asynchronous=False)
    lines = [("item-a", "Pearl Clip", 100.0), ("item-a", "Pearl Clip", 100.0), ("item-b", "Bow", 50.0)]
    for item_id, name, price in lines:
        current_domain.process(
            AddToCart(cart_id=cart_id, item_id=item_id, name=name, price=price),
            asynchronous=False,
        )
    return cart_id


class TestPlaceOrderCommand:
    def test_creates_pending_order(self, customer):
        cart_id = _cart_with_items()
        order_id = current_domain.process(PlaceOrder(cart_id=cart_id, **customer), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert order.order_value == 250.0
        assert order.customer_name == "Asha Rao"
        assert len(order.lines) == 2

    def test_clears_cart_after_order_is_saved(self, customer):
        cart_id = _cart_with_items()
        current_domain.process(PlaceOrder(cart_id=cart_id, **customer), asynchronous=False)
        assert current_domain.repository_for(ShoppingCart).get(cart_id).is_empty()

    def test_invalid_contact_keeps_cart(self, customer):
        cart_id = _cart_with_items()
        with pytest.raises(ValidationError):
            current_domain.process(
                PlaceOrder(cart_id=cart_id, **{**customer, "contact": "12345"}),
                asynchronous=False,
            )
        assert current_domain.repository_for(ShoppingCart).get(cart_id).total_items() == 3

    def test_empty_cart_is_rejected(self, customer):
        cart_id = current_domain.process(CreateCart(session_id="sess-empty"), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(PlaceOrder(cart_id=cart_id, **customer), asynchronous=False)


class TestCheckoutFromSession:
    def test_places_order_and_clears_session_cart(self, customer):
        storage = KeyValueCartStorage()
        session = CartSession("sess-001", storage)
        session.add_item("item-a", "Pearl Clip", 100.0)
        session.add_item("item-b", "Bow", 50.0)

        order_id = checkout(session, **customer)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.order_value == 150.0
        assert session.lines == []
        assert CartSession("sess-001", storage).lines == []

    def test_store_failure_keeps_cart_and_surfaces_remote_error(self, customer):
        session = CartSession("sess-001", KeyValueCartStorage())
        session.add_item("item-a", "Pearl Clip", 100.0)

        repo = current_domain.repository_for(Order)
        with patch.object(type(repo), "add", side_effect=ConnectionError("store offline")):
            with pytest.raises(RemoteError) as exc:
                checkout(session, **customer)

        assert "store offline" in exc.value.reason
        assert session.total_items() == 1

    def test_validation_failure_keeps_cart(self, customer):
        session = CartSession("sess-001", KeyValueCartStorage())
        session.add_item("item-a", "Pearl Clip", 100.0)
        with pytest.raises(ValidationError):
            checkout(session, **{**customer, "email": "not-an-email"})
        assert session.total_items() == 1


class TestPlaceOrderWrites:
    def test_rejected_commit_surfaces_remote_error(self, customer):
        cart_id = _cart_with_items()
        with patch.object(UnitOfWork, "commit", side_effect=ConnectionError("db down")):
            with pytest.raises(RemoteError) as exc:
                process_write(PlaceOrder(cart_id=cart_id, **customer), "create order")
        assert exc.value.operation == "create order"
        assert exc.value.reason == "db down"

    def test_validation_errors_pass_through(self, customer):
        cart_id = _cart_with_items()
        with pytest.raises(ValidationError):
            process_write(PlaceOrder(cart_id=cart_id, **{**customer, "contact": "12"}), "create order")
