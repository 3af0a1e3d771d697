"""Order mail — reacts to Order events by e-mailing the customer and the admin.

OrderPlaced sends the customer confirmation plus the new-order alert.
OrderDispatched sends the dispatch notice. Delivery is best-effort; the
order has already been written by the time these handlers run.
"""

import json

import structlog
from notifications.dispatcher import notify
from notifications.kinds import NotificationKind
from protean import handle

from ordering.domain import ordering
from ordering.order.events import OrderDispatched, OrderPlaced
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


def _items(cart_items):
    if isinstance(cart_items, str):
        return json.loads(cart_items)
    return list(cart_items or [])


@ordering.event_handler(part_of=Order)
class OrderNotificationsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        """Confirm the order to the customer and alert the shop admin."""
        results = notify(
            NotificationKind.ORDER_PLACED.value,
            {
                "order_id": str(event.order_id),
                "customer_name": event.customer_name,
                "email": event.email,
                "contact": event.contact,
                "order_value": event.order_value,
                "cart_items": _items(event.cart_items),
            },
        )
        logger.info(
            "Order placed mail processed",
            order_id=str(event.order_id),
            sent=sum(1 for result in results if result["status"] == "sent"),
            failed=sum(1 for result in results if result["status"] == "failed"),
        )

    @handle(OrderDispatched)
    def on_order_dispatched(self, event: OrderDispatched) -> None:
        notify(
            NotificationKind.ORDER_DISPATCHED.value,
            {
                "order_id": str(event.order_id),
                "customer_name": event.customer_name,
                "email": event.email,
                "cart_items": _items(event.cart_items),
                "order_value": event.order_value,
                "delivery_charges": event.delivery_charges,
                "discount_applied": event.discount_applied,
                "payment_received": event.payment_received,
                "final_payable": event.final_payable,
            },
        )
