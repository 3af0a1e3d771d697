"""Order dispatch — command and handler.

The dispatch is a single unconditional write of the loaded order. Two admins
dispatching the same order at once are not coordinated: the last write wins.
The write lands when the unit of work commits; routes go through
``shared.commands.process_write`` so a rejected commit surfaces as ``RemoteError``.
"""

from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class DispatchOrder:
    """Record the payment received and mark the order as dispatched."""

    order_id = Identifier(required=True)
    payment_received = Float(required=True)
    delivery_charges = Float()
    discount_applied = Float()


@ordering.command_handler(part_of=Order)
class DispatchOrderHandler:
    @handle(DispatchOrder)
    def dispatch_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        order.dispatch(
            payment_received=command.payment_received,
            delivery_charges=command.delivery_charges,
            discount_applied=command.discount_applied,
        )

        repo.add(order)

        logger.info(
            "Order dispatched",
            order_id=str(order.id),
            payment_received=order.payment_received,
            final_payable=order.final_payable,
        )
