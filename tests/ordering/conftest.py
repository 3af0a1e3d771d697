import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    from ordering.order.feed import order_feed

    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    order_feed.reset()


@pytest.fixture()
def customer():
    return {
        "customer_name": "Asha Rao",
        "contact": "9876543210",
        "email": "asha@example.com",
        "address": "12 MG Road, Bengaluru",
    }


@pytest.fixture()
def cart_lines():
    return [
        {"item_id": "item-a", "name": "Pearl Clip", "price": 100.0, "quantity": 2, "image_url": "a.jpg"},
        {"item_id": "item-b", "name": "Satin Scrunchie", "price": 50.0, "quantity": 1, "image_url": None},
    ]
