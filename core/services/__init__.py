# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .repository import MongoRepository
from .product_service import ProductService
from .category_service import CategoryService, SubcategoryService, SubSubcategoryService
from .promotion_service import BannerService, OfferService
from .order_service import OrderService
from .user_service import UserService
from .settings_service import SettingsService
from .report_service import ReportService
from .import_service import ImportService
from .storage_service import StorageService

__all__ = [
    "MongoRepository",
    "ProductService",
    "CategoryService",
    "SubcategoryService",
    "SubSubcategoryService",
    "BannerService",
    "OfferService",
    "OrderService",
    "UserService",
    "SettingsService",
    "ReportService",
    "ImportService",
    "StorageService",
]
