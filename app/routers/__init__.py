# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Liveness check (/health)
# - products.py: Catalog products
# - categories.py: Category tree (categories, subcategories, subsubcategories)
# - orders.py: Checkout and order management
# - users.py: Registration, login and roles
# - offers.py / banners.py: Promotions shown on the storefront
# - upload.py: Image hosting
# - imports.py: Bulk product import from CSV
# - reports.py: Sales reports
# - store_settings.py: Storefront settings document
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import products
from . import categories
from . import orders
from . import users
from . import offers
from . import banners
from . import upload
from . import imports
from . import reports
from . import store_settings

__all__ = [
    "health",
    "products",
    "categories",
    "orders",
    "users",
    "offers",
    "banners",
    "upload",
    "imports",
    "reports",
    "store_settings",
]
