# =============================================================================
# core/services/promotion_service.py - Offers and Banners
# =============================================================================

import logging
from typing import Any

from app.exceptions import BadRequestError
from core.models.promotion import BannerCreate, BannerUpdate, OfferCreate, OfferUpdate
from core.services.repository import MongoRepository
from lib.utils import to_storage_datetime, utcnow

logger = logging.getLogger(__name__)


class OfferService(MongoRepository):
    """
    Service for discount offers.

    An offer is "live" when it is active and now falls inside its
    [starts_at, ends_at] window; either end may be open.
    """

    collection_name = "offers"
    resource = "offer"

    async def list_offers(
        self,
        active: bool | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[dict[str, Any]], int]:
        query: dict[str, Any] = {}
        if active:
            now = utcnow()
            query = {
                "is_active": True,
                "$and": [
                    {"$or": [{"starts_at": None}, {"starts_at": {"$lte": now}}]},
                    {"$or": [{"ends_at": None}, {"ends_at": {"$gte": now}}]},
                ],
            }
        elif active is False:
            query = {"is_active": False}

        return await self.find_page(query, skip=skip, limit=limit, sort=[("created_at", -1)])

    async def create_offer(self, payload: OfferCreate) -> dict[str, Any]:
        return await self.create(payload.model_dump())

    async def update_offer(self, offer_id: str, payload: OfferUpdate) -> dict[str, Any]:
        """
        Update an offer, re-checking the window against stored values.

        Raises:
            BadRequestError: If the resulting window is inverted
        """
        data = payload.model_dump(exclude_unset=True)
        current = await self.get(offer_id)

        starts_at = to_storage_datetime(data.get("starts_at", current.get("starts_at")))
        ends_at = to_storage_datetime(data.get("ends_at", current.get("ends_at")))
        if starts_at and ends_at and ends_at <= starts_at:
            raise BadRequestError(
                "ends_at must be after starts_at",
                details={"starts_at": starts_at.isoformat(), "ends_at": ends_at.isoformat()},
            )

        return await self.update(offer_id, data)


class BannerService(MongoRepository):
    """Service for home page banners, ordered by position."""

    collection_name = "banners"
    resource = "banner"

    async def list_banners(
        self,
        active: bool | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[dict[str, Any]], int]:
        query = {} if active is None else {"is_active": active}
        return await self.find_page(
            query,
            skip=skip,
            limit=limit,
            sort=[("position", 1), ("created_at", 1)],
        )

    async def create_banner(self, payload: BannerCreate) -> dict[str, Any]:
        return await self.create(payload.model_dump())

    async def update_banner(self, banner_id: str, payload: BannerUpdate) -> dict[str, Any]:
        return await self.update(banner_id, payload.model_dump(exclude_unset=True, exclude_none=True))
