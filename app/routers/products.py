# =============================================================================
# app/routers/products.py - Product Endpoints
# =============================================================================
# Public catalog reads; writes require an admin token.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.auth import require_admin
from app.dependencies import PaginationDep, get_product_service, paginate
from core.models.common import DeleteResponse, Page
from core.models.product import ProductCreate, ProductResponse, ProductUpdate
from core.services.product_service import ProductService

router = APIRouter()

ServiceDep = Annotated[ProductService, Depends(get_product_service)]


@router.get("", response_model=Page[ProductResponse])
async def list_products(
    response: Response,
    service: ServiceDep,
    pagination: PaginationDep,
    category: Annotated[str | None, Query(description="Category id")] = None,
    subcategory: Annotated[str | None, Query(description="Subcategory id")] = None,
    subsubcategory: Annotated[str | None, Query(description="Sub-subcategory id")] = None,
    search: Annotated[str | None, Query(max_length=100, description="Name contains")] = None,
    featured: Annotated[bool | None, Query(description="Only featured products")] = None,
    available: Annotated[bool | None, Query(description="Filter by availability")] = None,
):
    """
    List products, newest first.

    Sets Content-Range for admin list views.
    """
    items, total = await service.list_products(
        category=category,
        subcategory=subcategory,
        subsubcategory=subsubcategory,
        search=search,
        featured=featured,
        available=available,
        skip=pagination.skip,
        limit=pagination.limit,
    )
    return paginate(response, "products", pagination, items, total)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, service: ServiceDep):
    """Get a single product."""
    return await service.get(product_id)


@router.post("", response_model=ProductResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_product(payload: ProductCreate, service: ServiceDep):
    """Create a product. The category must already exist."""
    return await service.create_product(payload)


@router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def update_product(product_id: str, payload: ProductUpdate, service: ServiceDep):
    """Update the provided product fields."""
    return await service.update_product(product_id, payload)


@router.delete("/{product_id}", response_model=DeleteResponse, dependencies=[Depends(require_admin)])
async def delete_product(product_id: str, service: ServiceDep):
    await service.delete_product(product_id)
    return DeleteResponse(id=product_id, message="Product removed")
