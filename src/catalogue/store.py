"""Read contract the storefront uses to browse the catalogue.

Every list is ordered by ``display_order``. A store that cannot be reached
surfaces as ``RemoteError``; callers decide whether to degrade.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.category.category import Category, Subcategory
from catalogue.domain import logger
from catalogue.item.item import CatalogueItem, item_images, primary_image
from shared.exceptions import RemoteError


def _category_dict(category):
    return {
        "id": str(category.id),
        "name": category.name,
        "display_order": category.display_order,
    }


def _subcategory_dict(subcategory):
    return {
        "id": str(subcategory.id),
        "category_id": str(subcategory.category_id),
        "name": subcategory.name,
        "display_order": subcategory.display_order,
    }


def _item_dict(item):
    return {
        "id": str(item.id),
        "subcategory_id": str(item.subcategory_id),
        "name": item.name,
        "price": item.price,
        "in_stock": item.in_stock,
        "description": item.description or "",
        "image_url": item.image_url,
        "images": item_images(item),
        "primary_image": primary_image(item),
        "display_order": item.display_order,
    }


def _fetch(operation, aggregate_cls, **filters):
    try:
        query = current_domain.repository_for(aggregate_cls)._dao.query
        if filters:
            query = query.filter(**filters)
        return query.order_by("display_order").all().items
    except Exception as exc:
        logger.error("Catalogue read failed", operation=operation, error=str(exc))
        raise RemoteError(operation, str(exc)) from exc


def list_categories() -> list[dict]:
    return [_category_dict(category) for category in _fetch("list_categories", Category)]


def list_subcategories(category_id: str | None = None) -> list[dict]:
    filters = {"category_id": category_id} if category_id else {}
    return [_subcategory_dict(sub) for sub in _fetch("list_subcategories", Subcategory, **filters)]


def list_items(subcategory_id: str | None = None) -> list[dict]:
    filters = {"subcategory_id": subcategory_id} if subcategory_id else {}
    return [_item_dict(item) for item in _fetch("list_items", CatalogueItem, **filters)]


def get_item(item_id: str) -> dict | None:
    """Fetch one item, or ``None`` when no item has that id."""
    try:
        item = current_domain.repository_for(CatalogueItem).get(item_id)
    except ObjectNotFoundError:
        return None
    except Exception as exc:
        logger.error("Catalogue read failed", operation="get_item", item_id=item_id, error=str(exc))
        raise RemoteError("get_item", str(exc)) from exc
    return _item_dict(item)


def count_out_of_stock() -> int:
    """Number of items currently marked out of stock."""
    return len(_fetch("count_out_of_stock", CatalogueItem, in_stock=False))
