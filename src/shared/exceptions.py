"""Errors shared across the storefront's bounded contexts.

Validation and not-found conditions use protean's own
``ValidationError`` and ``ObjectNotFoundError``. The two classes below cover
the remaining failure kinds: an unreachable or rejecting store, and a failed
e-mail delivery.
"""


class RemoteError(Exception):
    """A catalogue or order store could not be reached or rejected a write."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class NotificationError(Exception):
    """An order notification could not be delivered. Always non-fatal."""

    def __init__(self, kind: str, reason: str, recipient: str | None = None):
        self.kind = kind
        self.reason = reason
        self.recipient = recipient
        super().__init__(f"{kind} notification to {recipient or 'unknown'} failed: {reason}")
