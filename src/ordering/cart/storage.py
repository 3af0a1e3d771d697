"""Cart persistence port and adapters.

A ``CartStorage`` loads and saves the cart that belongs to one browsing
session. Two adapters are provided:

- ``RepositoryCartStorage`` stores carts through the ordering domain's
  repository (memory in tests, a database provider in production).
- ``KeyValueCartStorage`` keeps a JSON snapshot per session in any mutable
  mapping, under the fixed ``cutiefy-cart`` namespace. This mirrors a browser's
  local storage slot and works with ``shelve``, a Redis hash wrapper, or a
  plain dict.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from datetime import datetime

import structlog
from protean.utils.globals import current_domain

from ordering.cart.cart import CartLine, ShoppingCart
from shared.exceptions import RemoteError

logger = structlog.get_logger(__name__)

CART_NAMESPACE = "cutiefy-cart"


class CartStorage(ABC):
    """Abstract durable slot for a session's cart."""

    @abstractmethod
    def load(self, session_id: str) -> ShoppingCart | None:
        """Return the saved cart for the session, or None if nothing is saved."""
        ...

    @abstractmethod
    def save(self, cart: ShoppingCart) -> None:
        """Durably replace the saved cart for ``cart.session_id``."""
        ...


class RepositoryCartStorage(CartStorage):
    """Persist carts through the active domain's ShoppingCart repository."""

    def load(self, session_id: str) -> ShoppingCart | None:
        repo = current_domain.repository_for(ShoppingCart)
        try:
            carts = repo._dao.query.filter(session_id=session_id).all().items
        except Exception as exc:
            raise RemoteError("load cart", str(exc)) from exc
        if not carts:
            return None
        # Re-fetch through the repository so lines are loaded with the aggregate
        return repo.get(carts[0].id)

    def save(self, cart: ShoppingCart) -> None:
        try:
            current_domain.repository_for(ShoppingCart).add(cart)
        except Exception as exc:
            raise RemoteError("save cart", str(exc)) from exc


class KeyValueCartStorage(CartStorage):
    """Persist carts as JSON snapshots in a key-value mapping."""

    def __init__(self, slots: MutableMapping | None = None, namespace: str = CART_NAMESPACE):
        self.slots = slots if slots is not None else {}
        self.namespace = namespace

    def key_for(self, session_id: str) -> str:
        return f"{self.namespace}:{session_id}"

    def load(self, session_id: str) -> ShoppingCart | None:
        raw = self.slots.get(self.key_for(session_id))
        if raw is None:
            return None

        try:
            return _cart_from_snapshot(json.loads(raw))
        except (ValueError, KeyError, TypeError) as exc:
            # A corrupt slot behaves like an empty one
            logger.warning(
                "Discarding unreadable cart snapshot",
                session_id=session_id,
                error=str(exc),
            )
            return None

    def save(self, cart: ShoppingCart) -> None:
        self.slots[self.key_for(cart.session_id)] = json.dumps(_cart_to_snapshot(cart))
        # No unit of work drains this cart, so drop its pending events once saved
        cart._events = []


def _cart_to_snapshot(cart: ShoppingCart) -> dict:
    return {
        "id": str(cart.id),
        "session_id": cart.session_id,
        "items": [
            {
                "item_id": str(line.item_id),
                "name": line.name,
                "price": line.price,
                "quantity": line.quantity,
                "image_url": line.image_url,
                "position": line.position,
            }
            for line in cart.lines
        ],
        "created_at": cart.created_at.isoformat() if cart.created_at else None,
        "updated_at": cart.updated_at.isoformat() if cart.updated_at else None,
    }


def _cart_from_snapshot(data: dict) -> ShoppingCart:
    cart = ShoppingCart(
        id=data["id"],
        session_id=data["session_id"],
        created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else None,
        updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else None,
    )
    lines = [CartLine(**line) for line in data.get("items", [])]
    if lines:
        cart.add_items(lines)
    return cart
