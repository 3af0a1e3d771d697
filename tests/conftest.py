import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the protean config overlay before any domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("EMAIL_BACKEND", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def mailbox(monkeypatch):
    """Fresh in-memory e-mail adapter for every test."""
    from notifications.channel import reset_channels, set_channel
    from notifications.channel.fake_email import FakeEmailAdapter

    monkeypatch.setenv("ADMIN_EMAIL", "admin@cutiefy.test")
    monkeypatch.setenv("STORE_NAME", "Cutiefy")

    adapter = FakeEmailAdapter()
    set_channel(adapter)

    yield adapter

    reset_channels()
