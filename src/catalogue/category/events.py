"""Domain events for the Category and Subcategory aggregates."""

from protean.fields import Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the shop."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    display_order: Integer(required=True)


@catalogue.event(part_of="Subcategory")
class SubcategoryCreated:
    """A new subcategory was added under an existing category."""

    __version__ = 1

    subcategory_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True)
    display_order: Integer(required=True)


@catalogue.event(part_of="Category")
class CategoryUpdated:
    __version__ = 1

    category_id: Identifier(required=True)
    changed_fields: String(required=True)
    name: String()
    display_order: Integer()


@catalogue.event(part_of="Subcategory")
class SubcategoryUpdated:
    __version__ = 1

    subcategory_id: Identifier(required=True)
    changed_fields: String(required=True)
    name: String()
    display_order: Integer()
