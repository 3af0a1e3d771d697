"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Hair Accessories",
                    "display_order": 1,
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    display_order: int = 0


class UpdateCategoryRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    display_order: int | None = None


class CreateSubcategoryRequest(BaseModel):
    name: str = Field(..., max_length=100)
    display_order: int = 0


class UpdateSubcategoryRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    display_order: int | None = None


class AddCatalogueItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "subcategory_id": "sub-scrunchies",
                    "name": "Satin Scrunchie",
                    "price": 149.0,
                    "description": "Soft satin scrunchie in blush pink.",
                    "in_stock": True,
                    "images": ["https://cdn.example.com/scrunchie-1.jpg"],
                    "display_order": 0,
                }
            ]
        }
    }

    subcategory_id: str
    name: str = Field(..., max_length=255)
    price: float = Field(..., ge=0)
    description: str | None = None
    in_stock: bool = True
    image_url: str | None = Field(None, max_length=1024)
    images: list[str] | None = None
    display_order: int = 0


class UpdateCatalogueItemRequest(BaseModel):
    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, ge=0)
    description: str | None = None
    in_stock: bool | None = None
    image_url: str | None = Field(None, max_length=1024)
    images: list[str] | None = None
    display_order: int | None = None


# --- Response Schemas ---


class CategorySchema(BaseModel):
    id: str
    name: str
    display_order: int


class SubcategorySchema(BaseModel):
    id: str
    category_id: str
    name: str
    display_order: int


class CatalogueItemSchema(BaseModel):
    id: str
    subcategory_id: str
    name: str
    price: float
    in_stock: bool
    description: str
    image_url: str | None = None
    images: list[str]
    primary_image: str
    display_order: int


class CategoryListResponse(BaseModel):
    categories: list[CategorySchema]
    degraded: bool = False


class SubcategoryListResponse(BaseModel):
    subcategories: list[SubcategorySchema]
    degraded: bool = False


class CatalogueItemListResponse(BaseModel):
    items: list[CatalogueItemSchema]
    degraded: bool = False


class CategoryIdResponse(BaseModel):
    category_id: str


class SubcategoryIdResponse(BaseModel):
    subcategory_id: str


class ItemIdResponse(BaseModel):
    item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class ItemStatsResponse(BaseModel):
    out_of_stock_items: int
    degraded: bool = False
