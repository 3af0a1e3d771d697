"""Order summary — admin listing view, one row per order."""

import json

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.events import OrderDispatched, OrderPlaced
from ordering.order.order import Order, OrderStatus


@ordering.projection
class OrderSummary:
    order_id = Identifier(identifier=True, required=True)
    customer_name = String(required=True)
    contact = String()
    email = String()
    address = Text()
    status = String(required=True)
    item_count = Integer(default=0)
    order_value = Float()
    delivery_charges = Float()
    discount_applied = Float()
    payment_received = Float(default=0.0)
    created_at = DateTime()
    dispatched_at = DateTime()


@ordering.projector(projector_for=OrderSummary, aggregates=[Order])
class OrderSummaryProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        items = json.loads(event.cart_items) if isinstance(event.cart_items, str) else []
        current_domain.repository_for(OrderSummary).add(
            OrderSummary(
                order_id=event.order_id,
                customer_name=event.customer_name,
                contact=event.contact,
                email=event.email,
                address=event.address,
                status=OrderStatus.PENDING.value,
                item_count=sum(item.get("quantity", 0) for item in items),
                order_value=event.order_value,
                payment_received=0.0,
                created_at=event.created_at,
            )
        )

    @on(OrderDispatched)
    def on_order_dispatched(self, event):
        repo = current_domain.repository_for(OrderSummary)
        record = repo.get(event.order_id)
        record.status = OrderStatus.DISPATCHED.value
        record.delivery_charges = event.delivery_charges
        record.discount_applied = event.discount_applied
        record.payment_received = event.payment_received
        record.dispatched_at = event.dispatched_at
        repo.add(record)


def list_orders(status=None):
    """One-shot fetch of order summaries, newest first."""
    repo = current_domain.repository_for(OrderSummary)
    query = repo._dao.query
    if status:
        query = query.filter(status=status)
    return query.order_by("-created_at").all().items
