"""Item management — commands and handler."""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Subcategory
from catalogue.domain import catalogue, logger
from catalogue.item.item import CatalogueItem


@catalogue.command(part_of="CatalogueItem")
class AddCatalogueItem:
    subcategory_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    description: Text()
    in_stock: Boolean(default=True)
    image_url: String(max_length=1024)
    images: Text()  # JSON list of URLs
    display_order: Integer(default=0)


@catalogue.command(part_of="CatalogueItem")
class UpdateCatalogueItem:
    item_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float(min_value=0.0)
    description: Text()
    in_stock: Boolean()
    image_url: String(max_length=1024)
    images: Text()
    display_order: Integer()


@catalogue.command(part_of="CatalogueItem")
class DeleteCatalogueItem:
    item_id: Identifier(required=True)


@catalogue.command_handler(part_of=CatalogueItem)
class ManageCatalogueItemHandler:
    @handle(AddCatalogueItem)
    def add_item(self, command):
        current_domain.repository_for(Subcategory).get(command.subcategory_id)

        item = CatalogueItem.add(
            subcategory_id=command.subcategory_id,
            name=command.name,
            price=command.price,
            description=command.description,
            in_stock=command.in_stock if command.in_stock is not None else True,
            image_url=command.image_url,
            images=json.loads(command.images) if command.images else None,
            display_order=command.display_order or 0,
        )
        current_domain.repository_for(CatalogueItem).add(item)

        logger.info("Catalogue item added", item_id=str(item.id), name=item.name)
        return str(item.id)

    @handle(UpdateCatalogueItem)
    def update_item(self, command):
        repo = current_domain.repository_for(CatalogueItem)
        item = repo.get(command.item_id)
        item.update(
            name=command.name,
            price=command.price,
            description=command.description,
            in_stock=command.in_stock,
            image_url=command.image_url,
            images=json.loads(command.images) if command.images else None,
            display_order=command.display_order,
        )
        repo.add(item)

    @handle(DeleteCatalogueItem)
    def delete_item(self, command):
        repo = current_domain.repository_for(CatalogueItem)
        item = repo.get(command.item_id)
        repo._dao.delete(item)
        logger.info("Catalogue item deleted", item_id=str(item.id))
