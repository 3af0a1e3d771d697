"""CSV export of dispatched orders for the shop's bookkeeping."""

import csv
import io
from datetime import date

import structlog
from protean.utils.globals import current_domain

from ordering.order.order import Order, OrderStatus
from shared.exceptions import RemoteError

logger = structlog.get_logger(__name__)

EXPORT_HEADER = [
    "Order ID",
    "Customer Name",
    "Contact",
    "Email",
    "Address",
    "Items",
    "Order Value",
    "Delivery Charges",
    "Discount Applied",
    "Payment Received",
    "Order Date",
    "Dispatch Date",
]


def _amount(value) -> str:
    value = float(value or 0)
    return str(int(value)) if value.is_integer() else str(value)


def _items(order: Order) -> str:
    return "; ".join(f"{line['name']} x{line['quantity']}" for line in order.lines_snapshot())


def export_row(order: Order) -> list[str]:
    return [
        str(order.id),
        order.customer_name,
        order.contact,
        order.email,
        order.address,
        _items(order),
        _amount(order.order_value),
        _amount(order.delivery_charges),
        _amount(order.discount_applied),
        _amount(order.payment_received),
        order.created_timestamp.local_date(),
        order.dispatched_timestamp.local_date(),
    ]


def export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"dispatched-orders-{today.isoformat()}.csv"


def export_dispatched_orders(today: date | None = None) -> tuple[str, str]:
    """Render every dispatched order as CSV.

    Returns:
        ``(filename, content)``. Fields are quoted where needed and embedded
        double quotes are doubled.
    """
    try:
        orders = (
            current_domain.repository_for(Order)
            ._dao.query.filter(status=OrderStatus.DISPATCHED.value)
            .order_by("-created_at")
            .all()
            .items
        )
    except Exception as exc:
        raise RemoteError("export_dispatched_orders", str(exc)) from exc

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for order in orders:
        writer.writerow(export_row(order))

    filename = export_filename(today)
    logger.info("Dispatched orders exported", filename=filename, rows=len(orders))
    return filename, buffer.getvalue()
