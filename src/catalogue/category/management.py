"""Category management — commands and handlers.

Deleting a category or subcategory that still has children is rejected, so
the browse tree never holds orphaned subcategories or items.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.category.category import Category, Subcategory
from catalogue.domain import catalogue, logger
from catalogue.item.item import CatalogueItem


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    display_order: Integer(default=0)


@catalogue.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    display_order: Integer()


@catalogue.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@catalogue.command(part_of="Subcategory")
class CreateSubcategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    display_order: Integer(default=0)


@catalogue.command(part_of="Subcategory")
class UpdateSubcategory:
    subcategory_id: Identifier(required=True)
    name: String(max_length=100)
    display_order: Integer()


@catalogue.command(part_of="Subcategory")
class DeleteSubcategory:
    subcategory_id: Identifier(required=True)


def _has_children(aggregate_cls, **filters) -> bool:
    return bool(current_domain.repository_for(aggregate_cls)._dao.query.filter(**filters).all().items)


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(
            name=command.name,
            display_order=command.display_order or 0,
        )
        current_domain.repository_for(Category).add(category)

        logger.info("Category created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.update(name=command.name, display_order=command.display_order)
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        if _has_children(Subcategory, category_id=command.category_id):
            raise ValidationError({"category_id": ["Category still has subcategories"]})

        repo._dao.delete(category)
        logger.info("Category deleted", category_id=str(category.id))


@catalogue.command_handler(part_of=Subcategory)
class ManageSubcategoryHandler:
    @handle(CreateSubcategory)
    def create_subcategory(self, command):
        # Parent must exist; raises ObjectNotFoundError otherwise
        current_domain.repository_for(Category).get(command.category_id)

        subcategory = Subcategory.create(
            category_id=command.category_id,
            name=command.name,
            display_order=command.display_order or 0,
        )
        current_domain.repository_for(Subcategory).add(subcategory)

        logger.info(
            "Subcategory created",
            subcategory_id=str(subcategory.id),
            category_id=str(subcategory.category_id),
        )
        return str(subcategory.id)

    @handle(UpdateSubcategory)
    def update_subcategory(self, command):
        repo = current_domain.repository_for(Subcategory)
        subcategory = repo.get(command.subcategory_id)
        subcategory.update(name=command.name, display_order=command.display_order)
        repo.add(subcategory)

    @handle(DeleteSubcategory)
    def delete_subcategory(self, command):
        repo = current_domain.repository_for(Subcategory)
        subcategory = repo.get(command.subcategory_id)
        if _has_children(CatalogueItem, subcategory_id=command.subcategory_id):
            raise ValidationError({"subcategory_id": ["Subcategory still has items"]})

        repo._dao.delete(subcategory)
        logger.info("Subcategory deleted", subcategory_id=str(subcategory.id))
