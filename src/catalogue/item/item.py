"""CatalogueItem aggregate — something a customer can put in the cart."""

import json

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue
from shared.timestamps import server_now

PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x400/F8D4DC/2C2C2C?text=No+Image"


@catalogue.aggregate
class CatalogueItem:
    """A shop item listed under a subcategory.

    ``images`` holds a JSON list of URLs. Older items carry a single
    ``image_url`` instead; ``item_images`` reconciles the two.
    """

    subcategory_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    in_stock: Boolean(default=True)
    image_url: String(max_length=1024)
    images: Text()
    description: Text()
    display_order: Integer(default=0)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def add(
        cls,
        subcategory_id,
        name,
        price,
        description=None,
        in_stock=True,
        image_url=None,
        images=None,
        display_order=0,
    ):
        from catalogue.item.events import CatalogueItemAdded

        now = server_now()
        item = cls(
            subcategory_id=subcategory_id,
            name=name,
            price=price,
            description=description,
            in_stock=in_stock,
            image_url=image_url,
            images=json.dumps(list(images)) if images else None,
            display_order=display_order,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            CatalogueItemAdded(
                item_id=item.id,
                subcategory_id=subcategory_id,
                name=name,
                price=price,
                in_stock=in_stock,
            )
        )
        return item

    def update(self, **changes):
        """Apply the given field changes; ``None`` values leave a field untouched."""
        from catalogue.item.events import CatalogueItemUpdated

        changed = []
        for field_name in ("name", "price", "description", "in_stock", "image_url", "display_order"):
            value = changes.get(field_name)
            if value is not None and value != getattr(self, field_name):
                setattr(self, field_name, value)
                changed.append(field_name)

        if changes.get("images") is not None:
            self.images = json.dumps(list(changes["images"]))
            changed.append("images")

        if not changed:
            return

        self.updated_at = server_now()
        self.raise_(
            CatalogueItemUpdated(
                item_id=self.id,
                changed_fields=",".join(changed),
                price=self.price,
                in_stock=self.in_stock,
            )
        )

    @property
    def image_list(self):
        return json.loads(self.images) if self.images else []


def item_images(item):
    """Every image URL to show for ``item``, falling back to the placeholder."""
    images = [url for url in item.image_list if url and url.strip()]
    if images:
        return images
    if item.image_url and item.image_url.strip():
        return [item.image_url]
    return [PLACEHOLDER_IMAGE]


def primary_image(item):
    return item_images(item)[0]
