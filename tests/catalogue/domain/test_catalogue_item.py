"""Tests for the CatalogueItem aggregate and image resolution."""

from catalogue.item.events import CatalogueItemAdded, CatalogueItemUpdated
from catalogue.item.item import PLACEHOLDER_IMAGE, CatalogueItem, item_images, primary_image


def _item(**overrides):
    defaults = {"subcategory_id": "sub-001", "name": "Pearl Clip", "price": 120.0}
    defaults.update(overrides)
    return CatalogueItem.add(**defaults)


class TestAddItem:
    def test_defaults(self):
        item = _item()
        assert item.in_stock is True
        assert item.display_order == 0
        assert item.image_list == []

    def test_raises_event(self):
        item = _item()
        events = [e for e in item._events if isinstance(e, CatalogueItemAdded)]
        assert len(events) == 1
        assert events[0].price == 120.0


class TestUpdateItem:
    def test_changes_only_given_fields(self):
        item = _item(description="Classic")
        item.update(price=99.0, in_stock=False)
        assert item.price == 99.0
        assert item.in_stock is False
        assert item.description == "Classic"
        event = [e for e in item._events if isinstance(e, CatalogueItemUpdated)][0]
        assert event.changed_fields == "price,in_stock"

    def test_no_changes_raises_no_event(self):
        item = _item()
        item._events.clear()
        item.update(name="Pearl Clip")
        assert item._events == []


class TestItemImages:
    def test_images_list_wins(self):
        item = _item(images=["one.jpg", " ", "two.jpg"], image_url="legacy.jpg")
        assert item_images(item) == ["one.jpg", "two.jpg"]
        assert primary_image(item) == "one.jpg"

    def test_falls_back_to_single_image_url(self):
        item = _item(image_url="legacy.jpg")
        assert item_images(item) == ["legacy.jpg"]

    def test_placeholder_when_nothing_set(self):
        item = _item(image_url="  ")
        assert item_images(item) == [PLACEHOLDER_IMAGE]
        assert primary_image(item) == PLACEHOLDER_IMAGE
