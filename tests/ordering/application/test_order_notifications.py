"""Order events send mail to the customer and the shop admin."""

from ordering.order.dispatch import DispatchOrder
from ordering.order.order import Order, OrderStatus
from protean import current_domain


def _place(customer):
    order = Order.place(
        cart_lines=[{"item_id": "item-a", "name": "Pearl Clip", "price": 100.0, "quantity": 2}],
        **customer,
    )
    current_domain.repository_for(Order).add(order)
    return str(order.id)


class TestOrderPlacedMail:
    def test_customer_and_admin_are_mailed(self, customer, mailbox):
        order_id = _place(customer)

        confirmation = mailbox.sent_to("asha@example.com")
        alert = mailbox.sent_to("admin@cutiefy.test")
        assert len(confirmation) == 1
        assert confirmation[0]["subject"] == "Order Confirmation - Cutiefy"
        assert "Pearl Clip x2" in confirmation[0]["body"]
        assert len(alert) == 1
        assert order_id in alert[0]["body"]

    def test_mail_failure_does_not_block_order(self, customer, mailbox):
        mailbox.configure(should_succeed=False, failure_reason="SMTP down")
        order_id = _place(customer)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert mailbox.outbox == []

    def test_raising_channel_does_not_block_order(self, customer, mailbox):
        mailbox.configure(should_succeed=False, raise_on_send=True)
        order_id = _place(customer)
        assert current_domain.repository_for(Order).get(order_id) is not None


class TestOrderDispatchedMail:
    def test_customer_gets_dispatch_mail(self, customer, mailbox):
        order_id = _place(customer)
        mailbox.reset()

        current_domain.process(
            DispatchOrder(order_id=order_id, payment_received=250.0, delivery_charges=60.0, discount_applied=10.0),
            asynchronous=False,
        )

        mails = mailbox.sent_to("asha@example.com")
        assert len(mails) == 1
        assert mails[0]["subject"] == "Order Dispatched - Cutiefy"
        assert "Delivery Charges: ₹60" in mails[0]["body"]
        assert "Total Paid: ₹250" in mails[0]["body"]
        assert mailbox.sent_to("admin@cutiefy.test") == []

    def test_mail_failure_does_not_undo_dispatch(self, customer, mailbox):
        order_id = _place(customer)
        mailbox.configure(should_succeed=False)

        current_domain.process(DispatchOrder(order_id=order_id, payment_received=200.0), asynchronous=False)

        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.DISPATCHED.value
