# =============================================================================
# core/models/promotion.py - Offer and Banner Schemas
# =============================================================================
# Storefront marketing content:
# - Offer: a percentage discount on a set of products, optionally time-boxed
# - Banner: a home page slide, ordered by position
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Offers
# =============================================================================

class OfferBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    discount_percent: float = Field(..., gt=0, le=100)
    product_ids: list[str] = Field(default_factory=list)
    starts_at: datetime | None = Field(default=None, description="Offer window start (open if null)")
    ends_at: datetime | None = Field(default=None, description="Offer window end (open if null)")
    image: str | None = None
    is_active: bool = True


class OfferCreate(OfferBase):
    """
    Schema for creating an offer.

    The window must not be inverted.
    """

    @model_validator(mode="after")
    def check_window(self):
        if self.starts_at and self.ends_at and self.ends_at <= self.starts_at:
            raise ValueError("ends_at must be after starts_at")
        return self


class OfferUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    discount_percent: float | None = Field(default=None, gt=0, le=100)
    product_ids: list[str] | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    image: str | None = None
    is_active: bool | None = None


class OfferResponse(OfferBase):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Banners
# =============================================================================

class BannerBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    subtitle: str | None = Field(default=None, max_length=500)
    image: str = Field(..., min_length=1, description="Image URL")
    link: str | None = Field(default=None, description="Click-through URL or route")
    position: int = Field(default=0, ge=0, description="Sort order, ascending")
    is_active: bool = True


class BannerCreate(BannerBase):
    pass


class BannerUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    subtitle: str | None = Field(default=None, max_length=500)
    image: str | None = Field(default=None, min_length=1)
    link: str | None = None
    position: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class BannerResponse(BannerBase):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
