# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - common.py: Page and delete responses shared by list/delete endpoints
# - product.py: Catalog product schemas
# - category.py: Category / subcategory / sub-subcategory schemas
# - promotion.py: Offer and banner schemas
# - order.py: Order schemas and status lifecycle
# - user.py: Registration, login and profile schemas
# - store.py: Store settings, import results and sales reports
#
# These models define the "contract" between API and clients.
# =============================================================================

from .common import DeleteResponse, Page
from .product import ProductCreate, ProductResponse, ProductUpdate
from .category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    SubcategoryCreate,
    SubcategoryResponse,
    SubcategoryUpdate,
    SubSubcategoryCreate,
    SubSubcategoryResponse,
    SubSubcategoryUpdate,
)
from .promotion import (
    BannerCreate,
    BannerResponse,
    BannerUpdate,
    OfferCreate,
    OfferResponse,
    OfferUpdate,
)
from .order import (
    ALLOWED_TRANSITIONS,
    CustomerInfo,
    OrderCreate,
    OrderItem,
    OrderItemCreate,
    OrderResponse,
    OrderStatus,
    OrderStatusUpdate,
)
from .user import AuthResponse, RoleUpdate, UserLogin, UserRegister, UserResponse, UserRole
from .store import (
    DailySales,
    ImportResult,
    ImportRowError,
    ProductSales,
    SalesReport,
    StoreSettings,
    StoreSettingsUpdate,
)

__all__ = [
    # Common
    "DeleteResponse",
    "Page",
    # Products
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    # Categories
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "SubcategoryCreate",
    "SubcategoryResponse",
    "SubcategoryUpdate",
    "SubSubcategoryCreate",
    "SubSubcategoryResponse",
    "SubSubcategoryUpdate",
    # Promotions
    "BannerCreate",
    "BannerResponse",
    "BannerUpdate",
    "OfferCreate",
    "OfferResponse",
    "OfferUpdate",
    # Orders
    "ALLOWED_TRANSITIONS",
    "CustomerInfo",
    "OrderCreate",
    "OrderItem",
    "OrderItemCreate",
    "OrderResponse",
    "OrderStatus",
    "OrderStatusUpdate",
    # Users
    "AuthResponse",
    "RoleUpdate",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "UserRole",
    # Store
    "DailySales",
    "ImportResult",
    "ImportRowError",
    "ProductSales",
    "SalesReport",
    "StoreSettings",
    "StoreSettingsUpdate",
]
