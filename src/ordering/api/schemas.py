"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    session_id: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "session_id": "sess-7f3a",
                }
            ]
        }
    }


class AddToCartRequest(BaseModel):
    item_id: str
    name: str
    price: float = Field(ge=0)
    image_url: str | None = None


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


class CheckoutRequest(BaseModel):
    customer_name: str
    contact: str
    email: str
    address: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Asha Rao",
                    "contact": "9876543210",
                    "email": "asha@example.com",
                    "address": "12 MG Road, Bengaluru",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class DispatchOrderRequest(BaseModel):
    payment_received: float
    delivery_charges: float | None = None
    discount_applied: float | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class CartLineSchema(BaseModel):
    item_id: str
    name: str
    price: float
    quantity: int
    image_url: str | None = None


class CartResponse(BaseModel):
    cart_id: str
    session_id: str
    items: list[CartLineSchema]
    total_items: int
    total_price: float


class OrderLineSchema(BaseModel):
    item_id: str
    name: str
    price: float
    quantity: int


class OrderResponse(BaseModel):
    order_id: str
    customer_name: str
    contact: str
    email: str
    address: str
    cart_items: list[OrderLineSchema]
    status: str
    order_value: float
    delivery_charges: float | None = None
    discount_applied: float | None = None
    payment_received: float
    final_payable: float
    created_at: datetime | None = None
    dispatched_at: datetime | None = None


class OrderSummaryResponse(BaseModel):
    order_id: str
    customer_name: str
    contact: str | None = None
    email: str | None = None
    status: str
    item_count: int
    order_value: float | None = None
    delivery_charges: float | None = None
    discount_applied: float | None = None
    payment_received: float | None = None
    created_at: datetime | None = None
    dispatched_at: datetime | None = None


class OrderStatsResponse(BaseModel):
    pending_orders: int
    dispatched_orders: int
    total_revenue: float
