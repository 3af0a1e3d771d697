"""Catalogue domain API package."""

from catalogue.api.routes import category_router, item_router, subcategory_router

__all__ = ["category_router", "subcategory_router", "item_router"]
