"""Order placed template — confirmation sent to the customer at checkout."""

from notifications.kinds import Audience, NotificationKind
from notifications.templates.formatting import item_lines, money, store_name


class OrderPlacedTemplate:
    kind = NotificationKind.ORDER_PLACED.value
    audience = Audience.CUSTOMER.value

    @staticmethod
    def render(context: dict) -> dict:
        customer_name = context.get("customer_name", "there")
        lines = "\n".join(item_lines(context.get("cart_items")))
        return {
            "subject": f"Order Confirmation - {store_name()}",
            "body": (
                f"Thank you for your order, {customer_name}!\n\n"
                f"We've received your order with value {money(context.get('order_value'))}.\n\n"
                f"{lines}\n\n"
                "We will contact you shortly for payment details."
            ),
        }
