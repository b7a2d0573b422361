# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The database connector, image-host client and settings are built once
# into a Services container that lives on app.state. Nothing here is a
# module-level global, so tests can build an app around in-memory handles.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, Query, Request, Response
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import Settings
from core.services import (
    BannerService,
    CategoryService,
    ImportService,
    OfferService,
    OrderService,
    ProductService,
    ReportService,
    SettingsService,
    StorageService,
    SubcategoryService,
    SubSubcategoryService,
    UserService,
)
from lib.cloudinary_client import CloudinaryClient
from lib.mongo_client import MongoConnector


# =============================================================================
# Service Container
# =============================================================================

@dataclass
class Services:
    """Explicitly constructed handles shared by all requests."""

    settings: Settings
    mongo: MongoConnector
    media: CloudinaryClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "Services":
        return cls(
            settings=settings,
            mongo=MongoConnector.from_settings(settings),
            media=CloudinaryClient.from_settings(settings),
        )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_app_settings(request: Request) -> Settings:
    return request.app.state.services.settings


def get_database(services: Annotated[Services, Depends(get_services)]) -> AsyncIOMotorDatabase:
    return services.mongo.database


ServicesDep = Annotated[Services, Depends(get_services)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
DatabaseDep = Annotated[AsyncIOMotorDatabase, Depends(get_database)]


# =============================================================================
# Pagination
# =============================================================================

class Pagination:
    """?page=&limit= query parameters."""

    def __init__(
        self,
        page: Annotated[int, Query(ge=1, description="Page number")] = 1,
        limit: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 20,
    ):
        self.page = page
        self.limit = limit

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


PaginationDep = Annotated[Pagination, Depends()]


def paginate(
    response: Response,
    resource: str,
    pagination: Pagination,
    items: list[dict[str, Any]],
    total: int,
) -> dict[str, Any]:
    """
    Build a page body and set the Content-Range header.

    Example header: "products 0-19/57", or "products */57" for an empty page.
    """
    if items:
        start = pagination.skip
        end = start + len(items) - 1
        response.headers["Content-Range"] = f"{resource} {start}-{end}/{total}"
    else:
        response.headers["Content-Range"] = f"{resource} */{total}"

    return {
        "items": items,
        "total": total,
        "page": pagination.page,
        "limit": pagination.limit,
    }


# =============================================================================
# Resource Services
# =============================================================================

def get_product_service(db: DatabaseDep) -> ProductService:
    return ProductService(db)


def get_category_service(db: DatabaseDep) -> CategoryService:
    return CategoryService(db)


def get_subcategory_service(db: DatabaseDep) -> SubcategoryService:
    return SubcategoryService(db)


def get_subsubcategory_service(db: DatabaseDep) -> SubSubcategoryService:
    return SubSubcategoryService(db)


def get_offer_service(db: DatabaseDep) -> OfferService:
    return OfferService(db)


def get_banner_service(db: DatabaseDep) -> BannerService:
    return BannerService(db)


def get_order_service(db: DatabaseDep) -> OrderService:
    return OrderService(db)


def get_user_service(db: DatabaseDep, settings: SettingsDep) -> UserService:
    return UserService(db, admin_emails=settings.admin_emails_list)


def get_settings_service(db: DatabaseDep) -> SettingsService:
    return SettingsService(db)


def get_report_service(db: DatabaseDep) -> ReportService:
    return ReportService(db)


def get_import_service(db: DatabaseDep) -> ImportService:
    return ImportService(
        products=ProductService(db),
        categories=CategoryService(db),
        subcategories=SubcategoryService(db),
    )


def get_storage_service(services: ServicesDep) -> StorageService:
    return StorageService(services.media)
