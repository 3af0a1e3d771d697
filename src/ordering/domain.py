"""Ordering bounded context — Shopping Cart and Order Lifecycle.

Handles the session-scoped shopping cart, the checkout flow that freezes a
cart into a pending order, and the admin dispatch transition.
"""

from protean.domain import Domain

from shared.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="cutiefy")

ordering = Domain(name="ordering")

logger = get_logger(__name__)
