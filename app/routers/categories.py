# =============================================================================
# app/routers/categories.py - Category Tree Endpoints
# =============================================================================
# The three levels of the catalog tree expose the same CRUD shape, so one
# builder produces a router per level:
#
#   categories_router        -> /api/categories
#   subcategories_router     -> /api/subcategories     (?category=<id>)
#   subsubcategories_router  -> /api/subsubcategories  (?subcategory=<id>)
# =============================================================================

from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, Query, Response

from app.auth import require_admin
from app.dependencies import (
    PaginationDep,
    get_category_service,
    get_subcategory_service,
    get_subsubcategory_service,
    paginate,
)
from core.models.category import (
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
from core.models.common import DeleteResponse, Page
from core.services.category_service import CategoryService


def build_category_router(
    resource: str,
    label: str,
    get_service: Callable[..., CategoryService],
    create_model: type,
    update_model: type,
    response_model: type,
    parent_param: str | None = None,
) -> APIRouter:
    """
    Build the CRUD router for one level of the tree.

    Args:
        resource: Plural name used in Content-Range
        label: Singular display name used in delete messages
        get_service: Dependency returning the level's service
        parent_param: Query parameter that filters by parent id
    """
    router = APIRouter()
    ServiceDep = Annotated[CategoryService, Depends(get_service)]

    async def list_entries(
        response: Response,
        service: ServiceDep,
        pagination: PaginationDep,
        active: Annotated[bool | None, Query(description="Filter by is_active")] = None,
        parent: Annotated[str | None, Query(alias=parent_param or "parent", include_in_schema=bool(parent_param))] = None,
    ) -> dict[str, Any]:
        items, total = await service.list_entries(
            parent_id=parent,
            active=active,
            skip=pagination.skip,
            limit=pagination.limit,
        )
        return paginate(response, resource, pagination, items, total)

    async def get_entry(entry_id: str, service: ServiceDep):
        return await service.get(entry_id)

    async def create_entry(payload: create_model, service: ServiceDep):
        return await service.create_entry(payload)

    async def update_entry(entry_id: str, payload: update_model, service: ServiceDep):
        return await service.update_entry(entry_id, payload)

    async def delete_entry(entry_id: str, service: ServiceDep):
        await service.delete_entry(entry_id)
        return DeleteResponse(id=entry_id, message=f"{label} removed")

    admin = [Depends(require_admin)]
    router.add_api_route("", list_entries, methods=["GET"], response_model=Page[response_model])
    router.add_api_route("/{entry_id}", get_entry, methods=["GET"], response_model=response_model)
    router.add_api_route(
        "", create_entry, methods=["POST"], response_model=response_model, status_code=201, dependencies=admin
    )
    router.add_api_route("/{entry_id}", update_entry, methods=["PUT"], response_model=response_model, dependencies=admin)
    router.add_api_route("/{entry_id}", delete_entry, methods=["DELETE"], response_model=DeleteResponse, dependencies=admin)
    return router


categories_router = build_category_router(
    resource="categories",
    label="Category",
    get_service=get_category_service,
    create_model=CategoryCreate,
    update_model=CategoryUpdate,
    response_model=CategoryResponse,
)

subcategories_router = build_category_router(
    resource="subcategories",
    label="Subcategory",
    get_service=get_subcategory_service,
    create_model=SubcategoryCreate,
    update_model=SubcategoryUpdate,
    response_model=SubcategoryResponse,
    parent_param="category",
)

subsubcategories_router = build_category_router(
    resource="subsubcategories",
    label="Sub-subcategory",
    get_service=get_subsubcategory_service,
    create_model=SubSubcategoryCreate,
    update_model=SubSubcategoryUpdate,
    response_model=SubSubcategoryResponse,
    parent_param="subcategory",
)
