"""Checkout — freeze a cart into a pending order.

Two entry points share the same rules:

- ``PlaceOrder`` command, for carts persisted in the ordering repository
  (used by the HTTP API).
- ``checkout(session, ...)``, for a caller holding a ``CartSession``.

In both, the order is persisted first and the cart is cleared only afterwards,
so a failed write leaves the customer's cart untouched. The command handler's
writes land at unit-of-work commit; routes process it through
``shared.commands.process_write``, which reports a rejected commit as
``RemoteError``.
"""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.session import CartSession
from ordering.domain import logger, ordering
from ordering.order.order import Order
from shared.exceptions import RemoteError


@ordering.command(part_of="Order")
class PlaceOrder:
    cart_id = Identifier(required=True)
    customer_name = String(required=True, max_length=255)
    contact = String(required=True, max_length=20)
    email = String(required=True, max_length=254)
    address = Text(required=True)


def _persist_order(order):
    # No unit of work is active here, so the repository commits on add
    try:
        current_domain.repository_for(Order).add(order)
    except Exception as exc:
        logger.error("Order write rejected", order_id=str(order.id), error=str(exc))
        raise RemoteError("create order", str(exc)) from exc


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.get(command.cart_id)

        order = Order.place(
            customer_name=command.customer_name,
            contact=command.contact,
            email=command.email,
            address=command.address,
            cart_lines=cart.lines_snapshot(),
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            cart_id=str(cart.id),
            order_value=order.order_value,
        )
        return str(order.id)


def checkout(session: CartSession, customer_name, contact, email, address) -> str:
    """Place an order from a session's cart and clear the cart. Returns the order id."""
    order = Order.place(
        customer_name=customer_name,
        contact=contact,
        email=email,
        address=address,
        cart_lines=session.lines,
    )
    _persist_order(order)
    session.clear_cart()

    logger.info(
        "Order placed",
        order_id=str(order.id),
        session_id=session.session_id,
        order_value=order.order_value,
    )
    return str(order.id)
