from datetime import UTC, datetime

from shared.timestamps import ServerTimestamp, server_now


class TestServerNow:
    def test_is_timezone_aware_utc(self):
        assert server_now().tzinfo is not None
        assert server_now().utcoffset().total_seconds() == 0

    def test_strictly_increasing(self):
        stamps = [server_now() for _ in range(50)]
        assert all(earlier < later for earlier, later in zip(stamps, stamps[1:], strict=False))


class TestServerTimestamp:
    def test_pending_has_no_value(self):
        stamp = ServerTimestamp.pending()
        assert stamp.is_pending
        assert stamp.isoformat() is None
        assert stamp.local_date() == ""

    def test_resolved_timestamp_renders_day_first(self):
        stamp = ServerTimestamp.of(datetime(2024, 3, 7, 10, 30, tzinfo=UTC))
        assert not stamp.is_pending
        assert stamp.local_date() == "07/03/2024"
        assert stamp.isoformat() == "2024-03-07T10:30:00+00:00"

    def test_of_none_is_pending(self):
        assert ServerTimestamp.of(None) == ServerTimestamp.pending()
