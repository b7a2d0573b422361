# =============================================================================
# core/models/store.py - Store Settings, Import and Report Schemas
# =============================================================================
# - StoreSettings: the single storefront configuration document
# - ImportResult: outcome of a bulk product import
# - SalesReport: aggregated order figures for a date range
# =============================================================================

import datetime

from pydantic import BaseModel, Field


# =============================================================================
# Store Settings
# =============================================================================

class StoreSettings(BaseModel):
    """
    Storefront-wide settings.

    Defaults are returned until an admin saves the document for the
    first time.
    """
    store_name: str = Field(default="Catering Store", max_length=120)
    contact_email: str = Field(default="", max_length=200)
    contact_phone: str = Field(default="", max_length=40)
    address: str = Field(default="", max_length=500)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    delivery_fee: float = Field(default=0, ge=0)
    min_order_amount: float = Field(default=0, ge=0)
    is_open: bool = True


class StoreSettingsUpdate(BaseModel):
    store_name: str | None = Field(default=None, max_length=120)
    contact_email: str | None = Field(default=None, max_length=200)
    contact_phone: str | None = Field(default=None, max_length=40)
    address: str | None = Field(default=None, max_length=500)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    delivery_fee: float | None = Field(default=None, ge=0)
    min_order_amount: float | None = Field(default=None, ge=0)
    is_open: bool | None = None


# =============================================================================
# Bulk Import
# =============================================================================

class ImportRowError(BaseModel):
    row: int = Field(..., description="1-based data row number in the file")
    error: str


class ImportResult(BaseModel):
    imported: int = 0
    failed: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)


# =============================================================================
# Reports
# =============================================================================

class DailySales(BaseModel):
    date: datetime.date
    orders: int
    revenue: float


class ProductSales(BaseModel):
    product_id: str
    name: str
    quantity: int
    revenue: float


class SalesReport(BaseModel):
    order_count: int = 0
    revenue: float = 0
    average_order_value: float = 0
    by_status: dict[str, int] = Field(default_factory=dict)
    daily: list[DailySales] = Field(default_factory=list)
    top_products: list[ProductSales] = Field(default_factory=list)
