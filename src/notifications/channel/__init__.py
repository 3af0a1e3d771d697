"""E-mail channel registry.

Provides singleton access to the e-mail adapter. Uses the fake adapter by
default; set ``EMAIL_BACKEND=smtp`` (with the ``SMTP_*`` variables) to send
real mail.
"""

import os

from notifications.channel.email_port import EmailPort

_channel_instance: EmailPort | None = None


def get_channel() -> EmailPort:
    """Return the configured e-mail adapter (singleton)."""
    global _channel_instance
    if _channel_instance is None:
        backend = os.getenv("EMAIL_BACKEND", "fake").lower()
        if backend == "smtp":
            from notifications.channel.smtp_email import SmtpEmailAdapter

            _channel_instance = SmtpEmailAdapter.from_env()
        elif backend == "fake":
            from notifications.channel.fake_email import FakeEmailAdapter

            _channel_instance = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown email backend: {backend}")

    return _channel_instance


def set_channel(adapter: EmailPort) -> None:
    """Override the active e-mail adapter (useful for tests)."""
    global _channel_instance
    _channel_instance = adapter


def reset_channels() -> None:
    """Reset the adapter singleton (useful for testing)."""
    global _channel_instance
    _channel_instance = None
