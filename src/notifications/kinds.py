"""Order lifecycle events that trigger a notification."""

from enum import Enum


class NotificationKind(Enum):
    ORDER_PLACED = "order-placed"
    ORDER_DISPATCHED = "order-dispatched"


class Audience(Enum):
    CUSTOMER = "Customer"
    ADMIN = "Admin"
