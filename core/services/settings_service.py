# =============================================================================
# core/services/settings_service.py - Store Settings
# =============================================================================
# The storefront configuration is a single document with a fixed _id.
# Reads before the first save return the model defaults.
# =============================================================================

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.models.store import StoreSettings, StoreSettingsUpdate
from lib.utils import utcnow

logger = logging.getLogger(__name__)

SETTINGS_ID = "store"


class SettingsService:
    """Read and update the singleton store settings document."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db["settings"]

    async def get_settings(self) -> StoreSettings:
        doc = await self.collection.find_one({"_id": SETTINGS_ID})
        if doc is None:
            return StoreSettings()

        fields = {k: v for k, v in doc.items() if k in StoreSettings.model_fields}
        return StoreSettings(**fields)

    async def update_settings(self, payload: StoreSettingsUpdate) -> StoreSettings:
        """Upsert the provided fields and return the merged settings."""
        data = payload.model_dump(exclude_unset=True, exclude_none=True)
        if data:
            await self.collection.update_one(
                {"_id": SETTINGS_ID},
                {"$set": {**data, "updated_at": utcnow()}},
                upsert=True,
            )
            logger.info(f"Store settings updated: {sorted(data)}")

        return await self.get_settings()
