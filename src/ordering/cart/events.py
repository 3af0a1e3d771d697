"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A catalogue item was added to the cart, or its line was incremented."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    quantity = Integer(required=True)  # line quantity after the add


@ordering.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of a cart line was set to a new absolute value."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A line was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCleared:
    """All lines were removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    lines_removed = Integer(required=True)
