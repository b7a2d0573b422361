# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Catering API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload        (development)
#   python -m app.server                 (bounded graceful shutdown)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.dependencies import Services
from app.exceptions import (
    CateringAPIException,
    catering_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.lifecycle import run_shutdown, run_startup
from app.middleware import BodySizeLimitMiddleware
from app.routers import (
    banners,
    categories,
    health,
    imports,
    offers,
    orders,
    products,
    reports,
    store_settings,
    upload,
    users,
)

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", "X-Requested-With", "Accept", "Origin"]
CORS_EXPOSE_HEADERS = ["Content-Range", "X-Content-Range"]

# (router, prefix, tag)
API_ROUTES = [
    (products.router, "/api/products", "Products"),
    (users.router, "/api/users", "Users"),
    (orders.router, "/api/orders", "Orders"),
    (categories.categories_router, "/api/categories", "Categories"),
    (categories.subcategories_router, "/api/subcategories", "Subcategories"),
    (categories.subsubcategories_router, "/api/subsubcategories", "Sub-subcategories"),
    (upload.router, "/api/upload", "Upload"),
    (offers.router, "/api/offers", "Offers"),
    (reports.router, "/api/reports", "Reports"),
    (store_settings.router, "/api/settings", "Settings"),
    (imports.router, "/api/import", "Import"),
    (banners.router, "/api/banners", "Banners"),
]


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: connect MongoDB (fatal on failure), configure Cloudinary
    - Shutdown: close the MongoDB client after in-flight requests drained
    """
    services: Services = app.state.services
    app.state.startup_report = await run_startup(services)

    yield

    await run_shutdown(services)


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment
        services: Pre-built service handles (tests pass in-memory ones)
    """
    if services is not None:
        settings = services.settings
    settings = settings or get_settings()
    services = services or Services.from_settings(settings)

    app = FastAPI(
        title="Catering API",
        description="REST backend for a catering storefront: catalog, orders, promotions and admin tools.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    # =========================================================================
    # Middleware
    # =========================================================================
    # Added last runs first: CORS is the outermost layer.

    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(CateringAPIException, catering_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, tags=["Health"])
    for router, prefix, tag in API_ROUTES:
        app.include_router(router, prefix=prefix, tags=[tag])

    return app


configure_logging(get_settings())
app = create_app()
