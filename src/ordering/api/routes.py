"""FastAPI routes for the Ordering domain — carts and orders."""

from fastapi import APIRouter
from fastapi.responses import Response
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartResponse,
    CheckoutRequest,
    CreateCartRequest,
    DispatchOrderRequest,
    OrderIdResponse,
    OrderResponse,
    OrderStatsResponse,
    OrderSummaryResponse,
    StatusResponse,
    UpdateCartQuantityRequest,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import CreateCart
from ordering.export import export_dispatched_orders
from ordering.order.checkout import PlaceOrder
from ordering.order.dispatch import DispatchOrder
from ordering.order.order import Order, OrderStatus
from ordering.projections.order_stats import order_stats
from ordering.projections.order_summary import list_orders
from shared.commands import process_write

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    command = CreateCart(session_id=body.session_id)
    result = process_write(command, "create cart")
    return CartIdResponse(cart_id=result)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    return CartResponse(
        cart_id=str(cart.id),
        session_id=cart.session_id,
        items=cart.lines_snapshot(),
        total_items=cart.total_items(),
        total_price=cart.total_price(),
    )


@cart_router.post("/{cart_id}/items", response_model=StatusResponse)
async def add_cart_item(cart_id: str, body: AddToCartRequest) -> StatusResponse:
    command = AddToCart(
        cart_id=cart_id,
        item_id=body.item_id,
        name=body.name,
        price=body.price,
        image_url=body.image_url,
    )
    process_write(command, "save cart")
    return StatusResponse()


@cart_router.put("/{cart_id}/items/{item_id}", response_model=StatusResponse)
async def update_cart_item_quantity(cart_id: str, item_id: str, body: UpdateCartQuantityRequest) -> StatusResponse:
    command = UpdateCartQuantity(
        cart_id=cart_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    process_write(command, "save cart")
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(cart_id: str, item_id: str) -> StatusResponse:
    command = RemoveFromCart(
        cart_id=cart_id,
        item_id=item_id,
    )
    process_write(command, "save cart")
    return StatusResponse()


@cart_router.delete("/{cart_id}/items", response_model=StatusResponse)
async def clear_cart(cart_id: str) -> StatusResponse:
    process_write(ClearCart(cart_id=cart_id), "save cart")
    return StatusResponse()


@cart_router.post("/{cart_id}/checkout", status_code=201, response_model=OrderIdResponse)
async def checkout_cart(cart_id: str, body: CheckoutRequest) -> OrderIdResponse:
    """Place an order from the cart's current lines and empty the cart."""
    command = PlaceOrder(
        cart_id=cart_id,
        customer_name=body.customer_name,
        contact=body.contact,
        email=body.email,
        address=body.address,
    )
    order_id = process_write(command, "create order")
    return OrderIdResponse(order_id=order_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderSummaryResponse])
async def get_orders(status: str | None = None) -> list[OrderSummaryResponse]:
    if status is not None and status not in {s.value for s in OrderStatus}:
        raise ValidationError({"status": [f"Unknown order status: {status}"]})
    return [
        OrderSummaryResponse(
            order_id=str(record.order_id),
            customer_name=record.customer_name,
            contact=record.contact,
            email=record.email,
            status=record.status,
            item_count=record.item_count,
            order_value=record.order_value,
            delivery_charges=record.delivery_charges,
            discount_applied=record.discount_applied,
            payment_received=record.payment_received,
            created_at=record.created_at,
            dispatched_at=record.dispatched_at,
        )
        for record in list_orders(status)
    ]


@order_router.get("/stats", response_model=OrderStatsResponse)
async def get_order_stats() -> OrderStatsResponse:
    """Pending and dispatched counts plus revenue for the admin dashboard."""
    return OrderStatsResponse(**order_stats())


@order_router.get("/export")
async def export_orders() -> Response:
    """Download dispatched orders as CSV."""
    filename, content = export_dispatched_orders()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    snapshot = current_domain.repository_for(Order).get(order_id).snapshot()
    snapshot["created_at"] = snapshot["created_at"].value
    snapshot["dispatched_at"] = snapshot["dispatched_at"].value
    return OrderResponse(**snapshot)


@order_router.put("/{order_id}/dispatch", response_model=StatusResponse)
async def dispatch_order(order_id: str, body: DispatchOrderRequest) -> StatusResponse:
    command = DispatchOrder(
        order_id=order_id,
        payment_received=body.payment_received,
        delivery_charges=body.delivery_charges,
        discount_applied=body.discount_applied,
    )
    process_write(command, "update order")
    return StatusResponse()
