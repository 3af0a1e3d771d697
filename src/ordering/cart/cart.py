"""Shopping Cart aggregate — session-scoped mapping of catalogue item to quantity.

The cart is a standard CQRS aggregate (not event sourced). It belongs to a
single browsing session, keeps at most one line per catalogue item, and is
frozen into an Order at checkout. Totals are always derived from the lines,
never stored.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)
from ordering.domain import ordering


@ordering.entity(part_of="ShoppingCart")
class CartLine:
    item_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    image_url = String(max_length=1024)
    position = Integer(default=0)  # display order within the cart


@ordering.aggregate
class ShoppingCart:
    session_id = String(required=True, max_length=255)
    items = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def lines(self):
        """Cart lines in the order they were first added."""
        return sorted(self.items or [], key=lambda line: line.position or 0)

    def line_for(self, item_id):
        return next((line for line in (self.items or []) if str(line.item_id) == str(item_id)), None)

    def total_items(self):
        """Sum of all line quantities (not the number of lines)."""
        return sum(line.quantity for line in (self.items or []))

    def total_price(self):
        """Sum of price * quantity over all lines. No rounding is applied."""
        return sum(line.price * line.quantity for line in (self.items or []))

    def is_empty(self):
        return not self.items

    def lines_snapshot(self):
        """Plain-dict copy of the lines, safe to hand to callers and observers."""
        return [
            {
                "item_id": str(line.item_id),
                "name": line.name,
                "price": line.price,
                "quantity": line.quantity,
                "image_url": line.image_url,
            }
            for line in self.lines
        ]

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, item_id, name, price, image_url=None):
        """Add one unit of an item, creating its line on first add."""
        existing = self.line_for(item_id)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            next_position = max((line.position or 0 for line in (self.items or [])), default=-1) + 1
            self.add_items(
                CartLine(
                    item_id=item_id,
                    name=name,
                    price=price,
                    quantity=1,
                    image_url=image_url,
                    position=next_position,
                )
            )
            quantity = 1

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item_id),
                name=name,
                price=price,
                quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        """Remove the line for an item. Removing an absent item is a no-op."""
        line = self.line_for(item_id)
        if line is None:
            return

        self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item_id),
            )
        )

    def update_quantity(self, item_id, quantity):
        """Set a line's quantity. Zero or negative removes the line."""
        if quantity <= 0:
            self.remove_item(item_id)
            return

        line = self.line_for(item_id)
        if line is None:
            return

        previous_quantity = line.quantity
        line.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def clear(self):
        """Remove every line."""
        lines = list(self.items or [])
        for line in lines:
            self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                session_id=self.session_id,
                lines_removed=len(lines),
            )
        )
