"""Domain events for the CatalogueItem aggregate."""

from protean.fields import Boolean, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="CatalogueItem")
class CatalogueItemAdded:
    """A new item was listed in the shop."""

    __version__ = 1

    item_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    in_stock: Boolean(default=True)


@catalogue.event(part_of="CatalogueItem")
class CatalogueItemUpdated:
    __version__ = 1

    item_id: Identifier(required=True)
    changed_fields: String(required=True)
    price: Float()
    in_stock: Boolean()
