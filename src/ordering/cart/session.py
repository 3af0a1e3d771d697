"""Session-scoped cart handle.

A ``CartSession`` owns the cart of one browsing session. Callers hold the
session object and call its operations; every mutation is saved through the
session's ``CartStorage`` before observers are told about the new lines, so a
restart always recovers the state observers last saw.
"""

from collections.abc import Callable

import structlog

from ordering.cart.cart import ShoppingCart
from ordering.cart.storage import CartStorage

logger = structlog.get_logger(__name__)

CartObserver = Callable[[list[dict]], None]


class CartSession:
    def __init__(self, session_id: str, storage: CartStorage):
        self.session_id = session_id
        self.storage = storage
        self._observers: list[CartObserver] = []
        self.cart = storage.load(session_id) or ShoppingCart.create(session_id=session_id)

    # -------------------------------------------------------------------
    # Cart operations
    # -------------------------------------------------------------------
    def add_item(self, item_id: str, name: str, price: float, image_url: str | None = None) -> None:
        self.cart.add_item(item_id=item_id, name=name, price=price, image_url=image_url)
        self._commit()

    def remove_item(self, item_id: str) -> None:
        self.cart.remove_item(item_id)
        self._commit()

    def update_quantity(self, item_id: str, quantity: int) -> None:
        self.cart.update_quantity(item_id, quantity)
        self._commit()

    def clear_cart(self) -> None:
        self.cart.clear()
        self._commit()

    def total_items(self) -> int:
        return self.cart.total_items()

    def total_price(self) -> float:
        return self.cart.total_price()

    @property
    def lines(self) -> list[dict]:
        return self.cart.lines_snapshot()

    # -------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------
    def subscribe(self, on_change: CartObserver) -> Callable[[], None]:
        """Register ``on_change`` for line snapshots; returns an idempotent unsubscribe."""
        self._observers.append(on_change)

        def unsubscribe() -> None:
            if on_change in self._observers:
                self._observers.remove(on_change)

        return unsubscribe

    def _commit(self) -> None:
        self.storage.save(self.cart)

        snapshot = self.cart.lines_snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception as exc:
                logger.error(
                    "Cart observer failed",
                    session_id=self.session_id,
                    error=str(exc),
                )
