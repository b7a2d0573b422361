# =============================================================================
# app/routers/banners.py - Home Page Banner Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.auth import require_admin
from app.dependencies import PaginationDep, get_banner_service, paginate
from core.models.common import DeleteResponse, Page
from core.models.promotion import BannerCreate, BannerResponse, BannerUpdate
from core.services.promotion_service import BannerService

router = APIRouter()

ServiceDep = Annotated[BannerService, Depends(get_banner_service)]


@router.get("", response_model=Page[BannerResponse])
async def list_banners(
    response: Response,
    service: ServiceDep,
    pagination: PaginationDep,
    active: Annotated[bool | None, Query(description="Filter by is_active")] = None,
):
    """List banners in display order."""
    items, total = await service.list_banners(active=active, skip=pagination.skip, limit=pagination.limit)
    return paginate(response, "banners", pagination, items, total)


@router.get("/{banner_id}", response_model=BannerResponse)
async def get_banner(banner_id: str, service: ServiceDep):
    return await service.get(banner_id)


@router.post("", response_model=BannerResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_banner(payload: BannerCreate, service: ServiceDep):
    return await service.create_banner(payload)


@router.put("/{banner_id}", response_model=BannerResponse, dependencies=[Depends(require_admin)])
async def update_banner(banner_id: str, payload: BannerUpdate, service: ServiceDep):
    return await service.update_banner(banner_id, payload)


@router.delete("/{banner_id}", response_model=DeleteResponse, dependencies=[Depends(require_admin)])
async def delete_banner(banner_id: str, service: ServiceDep):
    await service.delete(banner_id)
    return DeleteResponse(id=banner_id, message="Banner removed")
