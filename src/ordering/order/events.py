"""Domain events for the Order aggregate.

Events carry the order fields the notification templates and the admin read
models need, so consumers never have to reload the order.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A cart was frozen into a new pending order at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    contact = String(required=True)
    email = String(required=True)
    address = Text(required=True)
    cart_items = Text(required=True)  # JSON: list of {item_id, name, price, quantity}
    order_value = Float(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDispatched:
    """An admin recorded payment and dispatched a pending order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    email = String(required=True)
    cart_items = Text(required=True)  # JSON: list of {item_id, name, price, quantity}
    order_value = Float(required=True)
    delivery_charges = Float(default=0.0)
    discount_applied = Float(default=0.0)
    payment_received = Float(required=True)
    final_payable = Float(required=True)
    dispatched_at = DateTime(required=True)
