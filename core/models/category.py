# =============================================================================
# core/models/category.py - Category Hierarchy Schemas
# =============================================================================
# Three-level catalog tree:
#   Category -> Subcategory -> SubSubcategory
#
# Slugs are optional on input and derived from the name when omitted.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryBase(BaseModel):
    """Fields shared by every level of the category tree."""

    name: str = Field(..., min_length=1, max_length=120)
    slug: str | None = Field(
        default=None,
        max_length=140,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="URL slug; derived from name when omitted"
    )
    description: str | None = Field(default=None, max_length=2000)
    image: str | None = Field(default=None, description="Image URL")
    is_active: bool = True


class CategoryUpdateBase(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    slug: str | None = Field(
        default=None,
        max_length=140,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
    )
    description: str | None = Field(default=None, max_length=2000)
    image: str | None = None
    is_active: bool | None = None


# -----------------------------------------------------------------------------
# Category
# -----------------------------------------------------------------------------

class CategoryCreate(CategoryBase):
    """Top-level category, e.g. "Party Trays"."""


class CategoryUpdate(CategoryUpdateBase):
    pass


class CategoryResponse(CategoryBase):
    id: str
    slug: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# -----------------------------------------------------------------------------
# Subcategory
# -----------------------------------------------------------------------------

class SubcategoryCreate(CategoryBase):
    category_id: str = Field(..., description="Parent category id")


class SubcategoryUpdate(CategoryUpdateBase):
    category_id: str | None = None


class SubcategoryResponse(CategoryResponse):
    category_id: str


# -----------------------------------------------------------------------------
# Sub-subcategory
# -----------------------------------------------------------------------------

class SubSubcategoryCreate(CategoryBase):
    subcategory_id: str = Field(..., description="Parent subcategory id")


class SubSubcategoryUpdate(CategoryUpdateBase):
    subcategory_id: str | None = None


class SubSubcategoryResponse(CategoryResponse):
    subcategory_id: str
