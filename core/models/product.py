# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for catalog products:
# - ProductCreate: Input for creating a product (admin)
# - ProductUpdate: Partial update, every field optional
# - ProductResponse: Output when returning product data to clients
#
# Products hang off a category and optionally a subcategory and
# sub-subcategory. References are stored as ObjectId strings.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    """Fields shared by product input and output."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Display name"
    )

    description: str = Field(
        default="",
        max_length=5000,
        description="Long description shown on the product page"
    )

    # Unit price in the store currency
    price: float = Field(
        ...,
        gt=0,
        description="Unit price"
    )

    category_id: str = Field(..., description="Parent category id")
    subcategory_id: str | None = Field(default=None, description="Subcategory id")
    subsubcategory_id: str | None = Field(default=None, description="Sub-subcategory id")

    images: list[str] = Field(
        default_factory=list,
        description="Image URLs (usually Cloudinary secure URLs)"
    )

    stock: int = Field(default=0, ge=0, description="Units in stock")

    unit: str | None = Field(
        default=None,
        max_length=50,
        description="Selling unit, e.g. 'tray', 'per person'"
    )

    is_available: bool = Field(default=True, description="Can be ordered")
    is_featured: bool = Field(default=False, description="Shown on the home page")


class ProductCreate(ProductBase):
    """
    Schema for creating a new product.

    Example:
        {
            "name": "Chicken Shawarma Tray",
            "price": 45.0,
            "category_id": "65a1f0c2e4b0a1b2c3d4e5f6",
            "images": ["https://res.cloudinary.com/.../tray.jpg"]
        }
    """


class ProductUpdate(BaseModel):
    """Partial product update. Only provided fields are written."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    price: float | None = Field(default=None, gt=0)
    category_id: str | None = None
    subcategory_id: str | None = None
    subsubcategory_id: str | None = None
    images: list[str] | None = None
    stock: int | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, max_length=50)
    is_available: bool | None = None
    is_featured: bool | None = None


class ProductResponse(ProductBase):
    """Schema for returning product data to clients."""

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
