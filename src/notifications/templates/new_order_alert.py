"""New order alert — tells the shop admin an order is waiting for review."""

from notifications.kinds import Audience, NotificationKind
from notifications.templates.formatting import money


class NewOrderAlertTemplate:
    kind = NotificationKind.ORDER_PLACED.value
    audience = Audience.ADMIN.value

    @staticmethod
    def render(context: dict) -> dict:
        customer_name = context.get("customer_name", "N/A")
        return {
            "subject": f"New Order - {customer_name}",
            "body": (
                f"New Order from {customer_name}\n\n"
                f"Order ID: {context.get('order_id', 'N/A')}\n"
                f"Value: {money(context.get('order_value'))}\n"
                f"Contact: {context.get('contact', 'N/A')}, {context.get('email', 'N/A')}"
            ),
        }
