"""Tests for the dispatched-orders CSV export."""

import csv
import io
from datetime import date

from ordering.export import EXPORT_HEADER, export_dispatched_orders, export_filename
from ordering.order.order import Order
from protean import current_domain


def _order(customer, address="12 MG Road, Bengaluru", dispatch=True):
    order = Order.place(
        cart_lines=[
            {"item_id": "item-a", "name": "Pearl Clip", "price": 100.0, "quantity": 2},
            {"item_id": "item-b", "name": "Bow", "price": 50.5, "quantity": 1},
        ],
        **{**customer, "address": address},
    )
    if dispatch:
        order.dispatch(payment_received=300.0, delivery_charges=50.0)
    current_domain.repository_for(Order).add(order)
    return order


def _rows(content):
    return list(csv.reader(io.StringIO(content)))


class TestExportDispatchedOrders:
    def test_header(self, customer):
        _, content = export_dispatched_orders()
        assert _rows(content) == [EXPORT_HEADER]

    def test_only_dispatched_orders_are_exported(self, customer):
        dispatched = _order(customer)
        _order(customer, dispatch=False)

        rows = _rows(export_dispatched_orders()[1])
        assert len(rows) == 2
        assert rows[1][0] == str(dispatched.id)

    def test_row_contents(self, customer):
        order = _order(customer)
        row = _rows(export_dispatched_orders()[1])[1]

        assert row[1:5] == ["Asha Rao", "9876543210", "asha@example.com", "12 MG Road, Bengaluru"]
        assert row[5] == "Pearl Clip x2; Bow x1"
        assert row[6:10] == ["250.5", "50", "0", "300"]
        assert row[10] == order.created_at.strftime("%d/%m/%Y")
        assert row[11] == order.dispatched_at.strftime("%d/%m/%Y")

    def test_quotes_are_doubled(self, customer):
        _order(customer, address='Flat 4, "Rose Villa"')
        _, content = export_dispatched_orders()
        assert '"Flat 4, ""Rose Villa"""' in content
        assert _rows(content)[1][4] == 'Flat 4, "Rose Villa"'

    def test_filename_uses_export_date(self):
        filename, _ = export_dispatched_orders(today=date(2024, 3, 7))
        assert filename == "dispatched-orders-2024-03-07.csv"
        assert export_filename(date(2025, 12, 31)) == "dispatched-orders-2025-12-31.csv"
