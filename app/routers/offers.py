# =============================================================================
# app/routers/offers.py - Offer Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.auth import require_admin
from app.dependencies import PaginationDep, get_offer_service, paginate
from core.models.common import DeleteResponse, Page
from core.models.promotion import OfferCreate, OfferResponse, OfferUpdate
from core.services.promotion_service import OfferService

router = APIRouter()

ServiceDep = Annotated[OfferService, Depends(get_offer_service)]


@router.get("", response_model=Page[OfferResponse])
async def list_offers(
    response: Response,
    service: ServiceDep,
    pagination: PaginationDep,
    active: Annotated[
        bool | None,
        Query(description="true: only offers live right now; false: only disabled offers"),
    ] = None,
):
    items, total = await service.list_offers(active=active, skip=pagination.skip, limit=pagination.limit)
    return paginate(response, "offers", pagination, items, total)


@router.get("/{offer_id}", response_model=OfferResponse)
async def get_offer(offer_id: str, service: ServiceDep):
    return await service.get(offer_id)


@router.post("", response_model=OfferResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_offer(payload: OfferCreate, service: ServiceDep):
    return await service.create_offer(payload)


@router.put("/{offer_id}", response_model=OfferResponse, dependencies=[Depends(require_admin)])
async def update_offer(offer_id: str, payload: OfferUpdate, service: ServiceDep):
    return await service.update_offer(offer_id, payload)


@router.delete("/{offer_id}", response_model=DeleteResponse, dependencies=[Depends(require_admin)])
async def delete_offer(offer_id: str, service: ServiceDep):
    await service.delete(offer_id)
    return DeleteResponse(id=offer_id, message="Offer removed")
