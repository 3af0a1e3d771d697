"""Order dispatched template — sent to the customer once payment is recorded."""

from notifications.kinds import Audience, NotificationKind
from notifications.templates.formatting import item_lines, money, store_name


class OrderDispatchedTemplate:
    kind = NotificationKind.ORDER_DISPATCHED.value
    audience = Audience.CUSTOMER.value

    @staticmethod
    def render(context: dict) -> dict:
        customer_name = context.get("customer_name", "there")
        lines = "\n".join(item_lines(context.get("cart_items")))
        return {
            "subject": f"Order Dispatched - {store_name()}",
            "body": (
                f"Your order is on its way, {customer_name}!\n\n"
                f"{lines}\n\n"
                f"Subtotal: {money(context.get('order_value'))}\n"
                f"Delivery Charges: {money(context.get('delivery_charges'))}\n"
                f"Discount: {money(context.get('discount_applied'))}\n"
                f"Total Paid: {money(context.get('payment_received'))}\n\n"
                f"Thank you for shopping with {store_name()}!"
            ),
        }
