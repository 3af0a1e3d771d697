"""Admin dashboard figures over the order book.

Revenue is the sum of ``payment_received`` over dispatched orders; pending
orders contribute nothing until they are dispatched.
"""

from collections.abc import Callable, Iterable

from protean.utils.globals import current_domain

from ordering.domain import logger
from ordering.order.feed import order_feed
from ordering.order.order import OrderStatus
from ordering.projections.order_summary import OrderSummary
from shared.exceptions import RemoteError

StatsListener = Callable[[dict], None]


def summarise(orders: Iterable[dict]) -> dict:
    pending = dispatched = 0
    revenue = 0.0
    for order in orders:
        if order["status"] == OrderStatus.PENDING.value:
            pending += 1
        elif order["status"] == OrderStatus.DISPATCHED.value:
            dispatched += 1
            revenue += order.get("payment_received") or 0.0
    return {
        "pending_orders": pending,
        "dispatched_orders": dispatched,
        "total_revenue": revenue,
    }


def order_stats() -> dict:
    """One-shot dashboard figures from the order summary view."""
    try:
        records = current_domain.repository_for(OrderSummary)._dao.query.all().items
    except Exception as exc:
        logger.error("Order stats read failed", error=str(exc))
        raise RemoteError("order_stats", str(exc)) from exc
    return summarise({"status": r.status, "payment_received": r.payment_received} for r in records)


def subscribe_order_stats(on_change: StatsListener) -> Callable[[], None]:
    """Push fresh figures after every order write; returns the unsubscribe."""
    return order_feed.subscribe(lambda orders: on_change(summarise(orders)))
