"""Server-assigned timestamps.

Order timestamps are stamped by the ordering domain when a write is accepted,
never taken from client payloads. ``server_now`` is strictly increasing within a
process, even if the wall clock stalls or steps back.
"""

import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

_lock = threading.Lock()
_last_issued: datetime | None = None


def server_now() -> datetime:
    """Return the current UTC time, always later than any earlier result."""
    global _last_issued
    with _lock:
        now = datetime.now(UTC)
        if _last_issued is not None and now <= _last_issued:
            now = _last_issued + timedelta(microseconds=1)
        _last_issued = now
        return now


@dataclass(frozen=True)
class ServerTimestamp:
    """An opaque server timestamp; ``value`` is ``None`` until the store acknowledges it."""

    value: datetime | None = None

    @classmethod
    def pending(cls) -> "ServerTimestamp":
        return cls(None)

    @classmethod
    def of(cls, value: datetime | None) -> "ServerTimestamp":
        return cls(value)

    @property
    def is_pending(self) -> bool:
        return self.value is None

    def isoformat(self) -> str | None:
        return self.value.isoformat() if self.value is not None else None

    def local_date(self, fmt: str = "%d/%m/%Y") -> str:
        """Render the date part, or an empty string while pending."""
        return self.value.strftime(fmt) if self.value is not None else ""
