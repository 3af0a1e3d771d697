"""FastAPI endpoints for the Catalogue domain.

Browse endpoints never fail on a store outage: they answer with an empty
list and ``degraded: true`` so the storefront can offer a retry.
"""

import json

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from catalogue import store
from catalogue.api.schemas import (
    AddCatalogueItemRequest,
    CatalogueItemListResponse,
    CatalogueItemSchema,
    CategoryIdResponse,
    CategoryListResponse,
    CreateCategoryRequest,
    CreateSubcategoryRequest,
    ItemIdResponse,
    ItemStatsResponse,
    StatusResponse,
    SubcategoryIdResponse,
    SubcategoryListResponse,
    UpdateCatalogueItemRequest,
    UpdateCategoryRequest,
    UpdateSubcategoryRequest,
)
from catalogue.category.management import (
    CreateCategory,
    CreateSubcategory,
    DeleteCategory,
    DeleteSubcategory,
    UpdateCategory,
    UpdateSubcategory,
)
from catalogue.item.management import AddCatalogueItem, DeleteCatalogueItem, UpdateCatalogueItem
from shared.commands import process_write
from shared.exceptions import RemoteError

category_router = APIRouter(prefix="/categories", tags=["categories"])
subcategory_router = APIRouter(prefix="/subcategories", tags=["categories"])
item_router = APIRouter(prefix="/items", tags=["items"])


# --- Category endpoints ---


@category_router.get("", response_model=CategoryListResponse)
async def get_categories() -> CategoryListResponse:
    try:
        return CategoryListResponse(categories=store.list_categories())
    except RemoteError:
        return CategoryListResponse(categories=[], degraded=True)


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, display_order=body.display_order)
    result = process_write(command, "create category")
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(category_id=category_id, name=body.name, display_order=body.display_order)
    process_write(command, "update category")
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    process_write(DeleteCategory(category_id=category_id), "delete category")
    return StatusResponse()


@category_router.get("/{category_id}/subcategories", response_model=SubcategoryListResponse)
async def get_category_subcategories(category_id: str) -> SubcategoryListResponse:
    try:
        return SubcategoryListResponse(subcategories=store.list_subcategories(category_id))
    except RemoteError:
        return SubcategoryListResponse(subcategories=[], degraded=True)


@category_router.post("/{category_id}/subcategories", status_code=201, response_model=SubcategoryIdResponse)
async def create_subcategory(category_id: str, body: CreateSubcategoryRequest) -> SubcategoryIdResponse:
    command = CreateSubcategory(
        category_id=category_id,
        name=body.name,
        display_order=body.display_order,
    )
    result = process_write(command, "create subcategory")
    return SubcategoryIdResponse(subcategory_id=result)


# --- Subcategory endpoints ---


@subcategory_router.get("", response_model=SubcategoryListResponse)
async def get_subcategories() -> SubcategoryListResponse:
    try:
        return SubcategoryListResponse(subcategories=store.list_subcategories())
    except RemoteError:
        return SubcategoryListResponse(subcategories=[], degraded=True)


@subcategory_router.put("/{subcategory_id}", response_model=StatusResponse)
async def update_subcategory(subcategory_id: str, body: UpdateSubcategoryRequest) -> StatusResponse:
    command = UpdateSubcategory(
        subcategory_id=subcategory_id,
        name=body.name,
        display_order=body.display_order,
    )
    process_write(command, "update subcategory")
    return StatusResponse()


@subcategory_router.delete("/{subcategory_id}", response_model=StatusResponse)
async def delete_subcategory(subcategory_id: str) -> StatusResponse:
    process_write(DeleteSubcategory(subcategory_id=subcategory_id), "delete subcategory")
    return StatusResponse()


# --- Item endpoints ---


@item_router.get("", response_model=CatalogueItemListResponse)
async def get_items(subcategory_id: str | None = None) -> CatalogueItemListResponse:
    try:
        return CatalogueItemListResponse(items=store.list_items(subcategory_id))
    except RemoteError:
        return CatalogueItemListResponse(items=[], degraded=True)


@item_router.get("/stats", response_model=ItemStatsResponse)
async def get_item_stats() -> ItemStatsResponse:
    try:
        return ItemStatsResponse(out_of_stock_items=store.count_out_of_stock())
    except RemoteError:
        return ItemStatsResponse(out_of_stock_items=0, degraded=True)


@item_router.get("/{item_id}", response_model=CatalogueItemSchema)
async def get_item(item_id: str) -> CatalogueItemSchema:
    item = store.get_item(item_id)
    if item is None:
        raise ObjectNotFoundError(f"CatalogueItem with id {item_id} does not exist")
    return CatalogueItemSchema(**item)


@item_router.post("", status_code=201, response_model=ItemIdResponse)
async def add_item(body: AddCatalogueItemRequest) -> ItemIdResponse:
    command = AddCatalogueItem(
        subcategory_id=body.subcategory_id,
        name=body.name,
        price=body.price,
        description=body.description,
        in_stock=body.in_stock,
        image_url=body.image_url,
        images=json.dumps(body.images) if body.images else None,
        display_order=body.display_order,
    )
    result = process_write(command, "create item")
    return ItemIdResponse(item_id=result)


@item_router.put("/{item_id}", response_model=StatusResponse)
async def update_item(item_id: str, body: UpdateCatalogueItemRequest) -> StatusResponse:
    command = UpdateCatalogueItem(
        item_id=item_id,
        name=body.name,
        price=body.price,
        description=body.description,
        in_stock=body.in_stock,
        image_url=body.image_url,
        images=json.dumps(body.images) if body.images is not None else None,
        display_order=body.display_order,
    )
    process_write(command, "update item")
    return StatusResponse()


@item_router.delete("/{item_id}", response_model=StatusResponse)
async def delete_item(item_id: str) -> StatusResponse:
    process_write(DeleteCatalogueItem(item_id=item_id), "delete item")
    return StatusResponse()
