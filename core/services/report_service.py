# =============================================================================
# core/services/report_service.py - Sales Reports
# =============================================================================
# Aggregates orders with pandas. Cancelled orders are counted in by_status
# but excluded from every revenue figure.
# =============================================================================

import logging
from datetime import datetime
from typing import Any

import pandas as pd
from motor.motor_asyncio import AsyncIOMotorDatabase

from core.models.order import OrderStatus
from core.models.store import DailySales, ProductSales, SalesReport
from lib.utils import to_storage_datetime

logger = logging.getLogger(__name__)

TOP_PRODUCTS = 10


class ReportService:
    """Builds sales reports from the orders collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.orders = db["orders"]

    async def sales_report(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> SalesReport:
        """
        Summarize orders created in [start, end].

        Args:
            start: Inclusive lower bound (open if None)
            end: Inclusive upper bound (open if None)
        """
        query: dict[str, Any] = {}
        window: dict[str, datetime] = {}
        if start:
            window["$gte"] = to_storage_datetime(start)
        if end:
            window["$lte"] = to_storage_datetime(end)
        if window:
            query["created_at"] = window

        docs = await self.orders.find(query).to_list(length=None)
        logger.debug(f"Sales report over {len(docs)} orders ({start} - {end})")
        return build_sales_report(docs)


def build_sales_report(docs: list[dict[str, Any]]) -> SalesReport:
    """Aggregate raw order documents into a SalesReport."""
    if not docs:
        return SalesReport()

    orders = pd.DataFrame(
        [
            {
                "id": str(doc["_id"]),
                "status": doc.get("status", OrderStatus.PENDING.value),
                "total": float(doc.get("total", 0)),
                "created_at": doc.get("created_at"),
            }
            for doc in docs
        ]
    )
    orders["created_at"] = pd.to_datetime(orders["created_at"], utc=True)

    by_status = {str(k): int(v) for k, v in orders["status"].value_counts().items()}

    valid = orders[orders["status"] != OrderStatus.CANCELLED.value]
    if valid.empty:
        return SalesReport(by_status=by_status)

    order_count = int(len(valid))
    revenue = round(float(valid["total"].sum()), 2)

    daily_frame = (
        valid.groupby(valid["created_at"].dt.date)
        .agg(orders=("id", "count"), revenue=("total", "sum"))
        .reset_index()
        .sort_values("created_at")
    )
    daily = [
        DailySales(date=row.created_at, orders=int(row.orders), revenue=round(float(row.revenue), 2))
        for row in daily_frame.itertuples(index=False)
    ]

    return SalesReport(
        order_count=order_count,
        revenue=revenue,
        average_order_value=round(revenue / order_count, 2),
        by_status=by_status,
        daily=daily,
        top_products=_top_products(docs, set(valid["id"])),
    )


def _top_products(docs: list[dict[str, Any]], order_ids: set[str]) -> list[ProductSales]:
    lines = [
        {
            "product_id": item["product_id"],
            "name": item.get("name", ""),
            "quantity": int(item.get("quantity", 0)),
            "revenue": float(item.get("price", 0)) * int(item.get("quantity", 0)),
        }
        for doc in docs
        if str(doc["_id"]) in order_ids
        for item in doc.get("items", [])
    ]
    if not lines:
        return []

    totals = (
        pd.DataFrame(lines)
        .groupby("product_id")
        .agg(name=("name", "last"), quantity=("quantity", "sum"), revenue=("revenue", "sum"))
        .reset_index()
        .sort_values(["revenue", "quantity"], ascending=False)
        .head(TOP_PRODUCTS)
    )
    return [
        ProductSales(
            product_id=row.product_id,
            name=row.name,
            quantity=int(row.quantity),
            revenue=round(float(row.revenue), 2),
        )
        for row in totals.itertuples(index=False)
    ]
