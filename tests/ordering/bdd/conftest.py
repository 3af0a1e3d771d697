"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.session import CartSession
from ordering.cart.storage import KeyValueCartStorage
from ordering.order.checkout import checkout
from ordering.order.order import Order
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def storage():
    return KeyValueCartStorage()


@pytest.fixture()
def outcome():
    """Mutable holder for the result or error of the last When step."""
    return {}


@given(parsers.cfparse('a cart for session "{session_id}" holding:'), target_fixture="session")
def _(session_id, storage, datatable):
    session = CartSession(session_id, storage)
    header, *rows = datatable
    for row in rows:
        line = dict(zip(header, row, strict=True))
        session.add_item(line["item_id"], line["name"], float(line["price"]))
        session.update_quantity(line["item_id"], int(line["quantity"]))
    return session


@given("the customer has checked out", target_fixture="order_id")
def _(session, customer):
    return checkout(session, **customer)


@then(parsers.cfparse('the order is "{status}"'))
def _(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status


@then(parsers.cfparse("the cart still holds {count:d} items"))
def _(session, count):
    assert session.total_items() == count


@then(parsers.cfparse('a confirmation mail is sent to "{address}"'))
def _(mailbox, address):
    assert [m["subject"] for m in mailbox.sent_to(address)] == ["Order Confirmation - Cutiefy"]


@then("a new order alert is sent to the admin")
def _(mailbox):
    alerts = mailbox.sent_to("admin@cutiefy.test")
    assert len(alerts) == 1
    assert alerts[0]["subject"].startswith("New Order - ")


@then(parsers.cfparse('a dispatch mail is sent to "{address}"'))
def _(mailbox, address):
    assert "Order Dispatched - Cutiefy" in [m["subject"] for m in mailbox.sent_to(address)]
