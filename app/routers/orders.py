# =============================================================================
# app/routers/orders.py - Order Endpoints
# =============================================================================
# Checkout is open to guests; a token, when present, links the order to
# the user. Order management is admin-only, except that customers can read
# their own orders.
# =============================================================================

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.auth import AuthUser, get_current_user, get_current_user_optional, require_admin
from app.dependencies import PaginationDep, get_order_service, paginate
from app.exceptions import ForbiddenError
from core.models.common import DeleteResponse, Page
from core.models.order import OrderCreate, OrderResponse, OrderStatus, OrderStatusUpdate
from core.services.order_service import OrderService

router = APIRouter()

ServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.post("", response_model=OrderResponse, status_code=201)
async def place_order(
    payload: OrderCreate,
    service: ServiceDep,
    user: Optional[AuthUser] = Depends(get_current_user_optional),
):
    """
    Place an order.

    Prices come from the catalog, never from the request. Returns the
    stored order with subtotal, delivery fee and total.
    """
    return await service.place_order(payload, user_id=user.id if user else None)


@router.get("", response_model=Page[OrderResponse], dependencies=[Depends(require_admin)])
async def list_orders(
    response: Response,
    service: ServiceDep,
    pagination: PaginationDep,
    status: Annotated[OrderStatus | None, Query(description="Filter by status")] = None,
):
    items, total = await service.list_orders(status=status, skip=pagination.skip, limit=pagination.limit)
    return paginate(response, "orders", pagination, items, total)


@router.get("/mine", response_model=Page[OrderResponse])
async def list_my_orders(
    response: Response,
    service: ServiceDep,
    pagination: PaginationDep,
    user: AuthUser = Depends(get_current_user),
):
    """Orders placed by the authenticated user."""
    items, total = await service.list_orders(user_id=user.id, skip=pagination.skip, limit=pagination.limit)
    return paginate(response, "orders", pagination, items, total)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    service: ServiceDep,
    user: AuthUser = Depends(get_current_user),
):
    """Get an order. Admins see all orders, customers only their own."""
    order = await service.get(order_id)
    if not user.is_admin and order.get("user_id") != user.id:
        raise ForbiddenError("You can only view your own orders")
    return order


@router.patch("/{order_id}/status", response_model=OrderResponse, dependencies=[Depends(require_admin)])
async def update_order_status(order_id: str, payload: OrderStatusUpdate, service: ServiceDep):
    """Advance or cancel an order."""
    return await service.update_status(order_id, payload.status)


@router.delete("/{order_id}", response_model=DeleteResponse, dependencies=[Depends(require_admin)])
async def delete_order(order_id: str, service: ServiceDep):
    await service.delete(order_id)
    return DeleteResponse(id=order_id, message="Order removed")
