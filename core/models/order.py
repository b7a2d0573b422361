# =============================================================================
# core/models/order.py - Order Schemas
# =============================================================================
# These models define the API contract for orders:
# - OrderCreate: what the checkout form submits (product ids + quantities)
# - OrderResponse: the stored order with server-computed prices and totals
# - OrderStatus: lifecycle states
#
# Prices are never taken from the client; the service copies the current
# product name and price into each order line.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    """
    Possible states for an order.

    Flow: pending -> confirmed -> preparing -> delivered
    Any non-final state may move to cancelled.
    """
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    OrderStatus.PREPARING: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


class CustomerInfo(BaseModel):
    """Contact and delivery details captured at checkout."""
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(..., min_length=3, max_length=40)
    address: str = Field(..., min_length=1, max_length=500)


class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1, le=10000)


class OrderItem(BaseModel):
    """An order line with the price snapshot taken at checkout."""
    product_id: str
    name: str
    price: float
    quantity: int


class OrderCreate(BaseModel):
    """
    Schema for placing an order.

    Example:
        {
            "customer": {"name": "Ana", "email": "ana@example.com",
                         "phone": "555-0101", "address": "1 Main St"},
            "items": [{"product_id": "65a1...", "quantity": 2}],
            "event_date": "2026-11-01T18:00:00Z"
        }
    """
    customer: CustomerInfo
    items: list[OrderItemCreate] = Field(..., min_length=1)
    notes: str | None = Field(default=None, max_length=2000)
    event_date: datetime | None = Field(default=None, description="When the catering is needed")


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderResponse(BaseModel):
    """Schema for returning an order to clients."""
    id: str
    user_id: str | None = None
    customer: CustomerInfo
    items: list[OrderItem]
    subtotal: float
    delivery_fee: float = 0
    total: float
    status: OrderStatus
    notes: str | None = None
    event_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
