"""Cart management — command and handler for opening a session cart."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class CreateCart:
    """Open a cart for a browsing session, or return the one it already has."""

    session_id = String(required=True, max_length=255)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        existing = repo._dao.query.filter(session_id=command.session_id).all().items
        if existing:
            return str(existing[0].id)

        cart = ShoppingCart.create(session_id=command.session_id)
        repo.add(cart)
        return str(cart.id)
