"""Category and Subcategory aggregates — the two browse levels of the shop."""

from protean.fields import DateTime, Identifier, Integer, String

from catalogue.domain import catalogue
from shared.timestamps import server_now


@catalogue.aggregate
class Category:
    """A top-level shelf of the shop, such as "Jewellery" or "Hair Accessories"."""

    name: String(required=True, max_length=100)
    display_order: Integer(default=0)
    created_at: DateTime()

    @classmethod
    def create(cls, name, display_order=0):
        from catalogue.category.events import CategoryCreated

        category = cls(name=name, display_order=display_order, created_at=server_now())
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                display_order=display_order,
            )
        )
        return category

    def update(self, name=None, display_order=None):
        from catalogue.category.events import CategoryUpdated

        changed = _apply_changes(self, name=name, display_order=display_order)
        if changed:
            self.raise_(
                CategoryUpdated(
                    category_id=self.id,
                    changed_fields=",".join(changed),
                    name=self.name,
                    display_order=self.display_order,
                )
            )


@catalogue.aggregate
class Subcategory:
    """A second-level grouping inside a category; items hang off subcategories."""

    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    display_order: Integer(default=0)
    created_at: DateTime()

    @classmethod
    def create(cls, category_id, name, display_order=0):
        from catalogue.category.events import SubcategoryCreated

        subcategory = cls(
            category_id=category_id,
            name=name,
            display_order=display_order,
            created_at=server_now(),
        )
        subcategory.raise_(
            SubcategoryCreated(
                subcategory_id=subcategory.id,
                category_id=category_id,
                name=name,
                display_order=display_order,
            )
        )
        return subcategory

    def update(self, name=None, display_order=None):
        from catalogue.category.events import SubcategoryUpdated

        changed = _apply_changes(self, name=name, display_order=display_order)
        if changed:
            self.raise_(
                SubcategoryUpdated(
                    subcategory_id=self.id,
                    changed_fields=",".join(changed),
                    name=self.name,
                    display_order=self.display_order,
                )
            )


def _apply_changes(aggregate, **changes):
    """Set each non-None change that differs; return the names of changed fields."""
    changed = []
    for field_name, value in changes.items():
        if value is not None and value != getattr(aggregate, field_name):
            setattr(aggregate, field_name, value)
            changed.append(field_name)
    return changed
