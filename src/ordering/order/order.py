"""Order aggregate — a frozen snapshot of a cart plus its dispatch record.

State Machine (2 states):
    PENDING → DISPATCHED

An order is created once, at checkout, from a value copy of the cart lines.
Later cart changes never reach it. The only transition is the admin dispatch,
which records the payment received along with any delivery charges and
discount. The final payable amount is derived on read and never stored.
"""

import json
import re
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import OrderDispatched, OrderPlaced
from shared.timestamps import ServerTimestamp, server_now

CONTACT_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class OrderStatus(Enum):
    PENDING = "pending"
    DISPATCHED = "dispatched"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.DISPATCHED},
    OrderStatus.DISPATCHED: set(),  # Terminal
}


def validate_customer_details(customer_name, contact, email, address):
    """Return a field → messages dict for every customer field that fails validation."""
    errors = {}
    if not customer_name or not customer_name.strip():
        errors["customer_name"] = ["Please enter your name"]
    if not contact or not CONTACT_PATTERN.fullmatch(contact):
        errors["contact"] = ["Please enter a valid 10-digit contact number"]
    if not email or not EMAIL_PATTERN.fullmatch(email):
        errors["email"] = ["Please enter a valid email address"]
    if not address or not address.strip():
        errors["address"] = ["Please enter your delivery address"]
    return errors


@ordering.entity(part_of="Order")
class OrderLine:
    """A cart line as it was at checkout: price and quantity are locked."""

    item_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    position = Integer(default=0)


@ordering.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    contact = String(required=True, max_length=10)
    email = String(required=True, max_length=254)
    address = Text(required=True)
    cart_items = HasMany(OrderLine)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    order_value = Float(required=True, min_value=0.0)
    delivery_charges = Float()
    discount_applied = Float()
    payment_received = Float(default=0.0)
    created_at = DateTime()
    dispatched_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_name, contact, email, address, cart_lines):
        """Freeze cart lines into a new pending order.

        Args:
            customer_name: Name entered at checkout.
            contact: Exactly ten digits, no separators or country code.
            email: Customer e-mail address.
            address: Free-form delivery address.
            cart_lines: Iterable of dicts with item_id, name, price, quantity.
                Any other keys (such as image_url) are dropped.
        """
        lines = [dict(line) for line in cart_lines]

        errors = {}
        if not lines:
            errors["cart"] = ["Cannot place an order from an empty cart"]
        errors.update(validate_customer_details(customer_name, contact, email, address))
        if errors:
            raise ValidationError(errors)

        frozen = [
            {
                "item_id": str(line["item_id"]),
                "name": line["name"],
                "price": float(line["price"]),
                "quantity": int(line["quantity"]),
            }
            for line in lines
        ]
        order_value = sum(line["price"] * line["quantity"] for line in frozen)
        now = server_now()

        order = cls(
            customer_name=customer_name.strip(),
            contact=contact,
            email=email,
            address=address.strip(),
            status=OrderStatus.PENDING.value,
            order_value=order_value,
            payment_received=0.0,
            created_at=now,
        )
        order.add_cart_items([OrderLine(position=index, **line) for index, line in enumerate(frozen)])

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_name=order.customer_name,
                contact=order.contact,
                email=order.email,
                address=order.address,
                cart_items=json.dumps(frozen),
                order_value=order_value,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def lines(self):
        return sorted(self.cart_items or [], key=lambda line: line.position or 0)

    def lines_snapshot(self):
        return [
            {
                "item_id": str(line.item_id),
                "name": line.name,
                "price": line.price,
                "quantity": line.quantity,
            }
            for line in self.lines
        ]

    @property
    def final_payable(self):
        """order_value + delivery_charges - discount_applied, recomputed on every read."""
        return self.order_value + (self.delivery_charges or 0.0) - (self.discount_applied or 0.0)

    @property
    def created_timestamp(self):
        return ServerTimestamp.of(self.created_at)

    @property
    def dispatched_timestamp(self):
        if self.status == OrderStatus.PENDING.value:
            return ServerTimestamp.pending()
        return ServerTimestamp.of(self.dispatched_at)

    def snapshot(self):
        """Plain-dict view of the order for read models and feed subscribers."""
        return {
            "order_id": str(self.id),
            "customer_name": self.customer_name,
            "contact": self.contact,
            "email": self.email,
            "address": self.address,
            "cart_items": self.lines_snapshot(),
            "status": self.status,
            "order_value": self.order_value,
            "delivery_charges": self.delivery_charges,
            "discount_applied": self.discount_applied,
            "payment_received": self.payment_received,
            "final_payable": self.final_payable,
            "created_at": self.created_timestamp,
            "dispatched_at": self.dispatched_timestamp,
        }

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def dispatch(self, payment_received, delivery_charges=None, discount_applied=None):
        """Record payment and move the order to dispatched."""
        if payment_received is None or payment_received <= 0:
            raise ValidationError({"payment_received": ["Please enter payment received amount"]})
        self._assert_can_transition(OrderStatus.DISPATCHED)

        now = server_now()
        self.status = OrderStatus.DISPATCHED.value
        self.payment_received = payment_received
        self.delivery_charges = delivery_charges if delivery_charges is not None else 0.0
        self.discount_applied = discount_applied if discount_applied is not None else 0.0
        self.dispatched_at = now

        self.raise_(
            OrderDispatched(
                order_id=str(self.id),
                customer_name=self.customer_name,
                email=self.email,
                cart_items=json.dumps(self.lines_snapshot()),
                order_value=self.order_value,
                delivery_charges=self.delivery_charges,
                discount_applied=self.discount_applied,
                payment_received=self.payment_received,
                final_payable=self.final_payable,
                dispatched_at=now,
            )
        )
