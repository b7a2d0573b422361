# =============================================================================
# core/services/order_service.py - Order Business Logic
# =============================================================================
# Handles checkout (pricing from the catalog, store minimums, delivery fee)
# and the order status lifecycle.
# =============================================================================

import logging
from typing import Any

from pymongo import ReturnDocument

from app.exceptions import (
    BadRequestError,
    ConflictError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from core.models.order import ALLOWED_TRANSITIONS, OrderCreate, OrderStatus
from core.services.repository import MongoRepository
from core.services.settings_service import SettingsService
from lib.utils import parse_object_id, serialize_document, utcnow

logger = logging.getLogger(__name__)


class OrderService(MongoRepository):
    """Service for customer orders."""

    collection_name = "orders"
    resource = "order"

    async def place_order(
        self,
        payload: OrderCreate,
        user_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Price and store a new order.

        Each line copies the product's current name and price. The
        delivery fee and minimum order amount come from store settings.

        Raises:
            BadRequestError: If the store is closed, a product is unknown or
                unavailable, or the subtotal is below the minimum
        """
        store = await SettingsService(self.db).get_settings()
        if not store.is_open:
            raise BadRequestError(
                "The store is not accepting orders right now",
                suggestion="Try again when the store reopens",
            )

        items = []
        for line in payload.items:
            product = await self._orderable_product(line.product_id)
            items.append({
                "product_id": line.product_id,
                "name": product["name"],
                "price": float(product["price"]),
                "quantity": line.quantity,
            })

        subtotal = round(sum(item["price"] * item["quantity"] for item in items), 2)
        if subtotal < store.min_order_amount:
            raise BadRequestError(
                f"Order subtotal {subtotal:.2f} is below the minimum of {store.min_order_amount:.2f}",
                suggestion="Add more items to the order",
                details={"subtotal": subtotal, "min_order_amount": store.min_order_amount},
            )

        delivery_fee = round(store.delivery_fee, 2)
        order = await self.create({
            "user_id": user_id,
            "customer": payload.customer.model_dump(),
            "items": items,
            "subtotal": subtotal,
            "delivery_fee": delivery_fee,
            "total": round(subtotal + delivery_fee, 2),
            "status": OrderStatus.PENDING.value,
            "notes": payload.notes,
            "event_date": payload.event_date,
        })

        logger.info(f"Order {order['id']} placed: {len(items)} lines, total {order['total']}")
        return order

    async def list_orders(
        self,
        status: OrderStatus | None = None,
        user_id: str | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[dict[str, Any]], int]:
        query: dict[str, Any] = {}
        if status:
            query["status"] = status.value
        if user_id:
            query["user_id"] = user_id
        return await self.find_page(query, skip=skip, limit=limit, sort=[("created_at", -1)])

    async def update_status(self, order_id: str, status: OrderStatus) -> dict[str, Any]:
        """
        Move an order to a new status.

        The write only applies while the order still has the status that
        was checked, so two concurrent changes cannot both succeed.

        Raises:
            InvalidStatusTransitionError: If the transition is not allowed
            ConflictError: If the status changed after it was read
        """
        order = await self.get(order_id)
        current = OrderStatus(order["status"])
        allowed = ALLOWED_TRANSITIONS[current]

        if status not in allowed:
            raise InvalidStatusTransitionError(
                current.value,
                status.value,
                [s.value for s in allowed],
            )

        oid = parse_object_id(order_id)
        doc = await self.collection.find_one_and_update(
            {"_id": oid, "status": current.value},
            {"$set": {"status": status.value, "updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            if not await self.exists({"_id": oid}):
                raise NotFoundError(self.resource, order_id)
            raise ConflictError(
                f"Order {order_id} changed status while it was being updated",
                code="ORDER_STATUS_CHANGED",
                details={"expected": current.value, "requested": status.value},
            )

        logger.info(f"Order {order_id}: {current.value} -> {status.value}")
        return serialize_document(doc)

    async def _orderable_product(self, product_id: str) -> dict[str, Any]:
        oid = parse_object_id(product_id)
        product = await self.db["products"].find_one({"_id": oid}) if oid else None

        if product is None:
            raise BadRequestError(
                f"Product not found: {product_id}",
                details={"product_id": product_id},
            )
        if not product.get("is_available", True):
            raise BadRequestError(
                f"Product is not available: {product['name']}",
                details={"product_id": product_id},
            )
        return product
