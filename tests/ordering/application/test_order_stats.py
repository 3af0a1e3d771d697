"""Tests for the admin dashboard figures."""

from unittest.mock import MagicMock, patch

import pytest
from ordering.order.dispatch import DispatchOrder
from ordering.order.order import Order
from ordering.projections.order_stats import order_stats, subscribe_order_stats, summarise
from protean import current_domain
from shared.exceptions import RemoteError


def _place(customer, price=100.0):
    order = Order.place(
        cart_lines=[{"item_id": "item-a", "name": "Pearl Clip", "price": price, "quantity": 1}],
        **customer,
    )
    current_domain.repository_for(Order).add(order)
    return str(order.id)


def _dispatch(order_id, payment):
    current_domain.process(DispatchOrder(order_id=order_id, payment_received=payment), asynchronous=False)


class TestSummarise:
    def test_empty_order_book(self):
        assert summarise([]) == {"pending_orders": 0, "dispatched_orders": 0, "total_revenue": 0.0}

    def test_revenue_counts_only_dispatched_payments(self):
        orders = [
            {"status": "pending", "payment_received": 0.0},
            {"status": "dispatched", "payment_received": 350.0},
            {"status": "dispatched", "payment_received": None},
        ]
        assert summarise(orders) == {"pending_orders": 1, "dispatched_orders": 2, "total_revenue": 350.0}


class TestOrderStats:
    def test_figures_follow_dispatches(self, customer):
        first = _place(customer)
        _place(customer)
        _dispatch(first, 120.0)

        assert order_stats() == {"pending_orders": 1, "dispatched_orders": 1, "total_revenue": 120.0}

    def test_store_failure_raises_remote_error(self):
        broken = MagicMock()
        broken.repository_for.side_effect = ConnectionError("store offline")
        with patch("ordering.projections.order_stats.current_domain", broken):
            with pytest.raises(RemoteError) as exc:
                order_stats()
        assert exc.value.operation == "order_stats"


class TestLiveStats:
    def test_subscriber_gets_figures_after_each_write(self, customer):
        received = []
        unsubscribe = subscribe_order_stats(received.append)
        assert received[-1]["pending_orders"] == 0

        order_id = _place(customer)
        assert received[-1]["pending_orders"] == 1

        _dispatch(order_id, 250.0)
        assert received[-1] == {"pending_orders": 0, "dispatched_orders": 1, "total_revenue": 250.0}

        unsubscribe()
        _place(customer)
        assert received[-1]["pending_orders"] == 0
