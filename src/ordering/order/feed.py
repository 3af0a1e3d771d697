"""Live order feed for the admin review console.

Subscribers register a callback and an optional status filter. They receive
the current list of matching orders straight away and again after every
order is placed or dispatched. ``subscribe`` returns the unsubscribe
function; calling it more than once is harmless.
"""

from collections.abc import Callable
from uuid import uuid4

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.events import OrderDispatched, OrderPlaced
from ordering.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)

OrdersListener = Callable[[list[dict]], None]


def _check_status(status):
    if status is not None and status not in {s.value for s in OrderStatus}:
        raise ValidationError({"status": [f"Unknown order status: {status}"]})


class OrderFeed:
    def __init__(self):
        self._subscriptions: dict[str, tuple[OrdersListener, str | None]] = {}

    def snapshot(self, status: str | None = None) -> list[dict]:
        """Current orders, newest first, optionally filtered by status."""
        _check_status(status)
        query = current_domain.repository_for(Order)._dao.query
        if status:
            query = query.filter(status=status)
        return [order.snapshot() for order in query.order_by("-created_at").all().items]

    def subscribe(self, on_change: OrdersListener, status: str | None = None) -> Callable[[], None]:
        _check_status(status)
        token = uuid4().hex
        self._subscriptions[token] = (on_change, status)
        self._deliver(token, on_change, status)

        def unsubscribe() -> None:
            self._subscriptions.pop(token, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(self) -> None:
        for token, (on_change, status) in list(self._subscriptions.items()):
            self._deliver(token, on_change, status)

    def reset(self) -> None:
        self._subscriptions.clear()

    def _deliver(self, token, on_change, status):
        try:
            on_change(self.snapshot(status))
        except Exception as exc:
            logger.error(
                "Order feed subscriber failed",
                subscription=token,
                status_filter=status,
                error=str(exc),
            )


order_feed = OrderFeed()


@ordering.event_handler(part_of=Order)
class OrderFeedHandler:
    """Pushes a fresh snapshot to feed subscribers after every order write."""

    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        order_feed.publish()

    @handle(OrderDispatched)
    def on_order_dispatched(self, event: OrderDispatched) -> None:
        order_feed.publish()
