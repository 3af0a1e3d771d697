"""Production overlays must bound every remote call."""

import tomllib
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture(params=["catalogue", "ordering"])
def production(request):
    with open(SRC / request.param / "domain.toml", "rb") as fh:
        return tomllib.load(fh)["production"]


class TestProductionTimeouts:
    def test_database_has_connect_and_statement_timeouts(self, production):
        database = production["databases"]["default"]
        assert database["connect_args"]["connect_timeout"] > 0
        assert "statement_timeout=" in database["connect_args"]["options"]
        assert database["pool_timeout"] > 0

    def test_broker_has_socket_timeouts(self, production):
        broker = production["brokers"]["default"]
        assert broker["socket_timeout"] > 0
        assert broker["socket_connect_timeout"] > 0
