# =============================================================================
# app/routers/store_settings.py - Storefront Settings Endpoints
# =============================================================================
# A single settings document. Anyone can read it (the storefront needs
# the fee and opening state); only admins can change it.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends

from app.auth import require_admin
from app.dependencies import get_settings_service
from core.models.store import StoreSettings, StoreSettingsUpdate
from core.services.settings_service import SettingsService

router = APIRouter()

ServiceDep = Annotated[SettingsService, Depends(get_settings_service)]


@router.get("", response_model=StoreSettings)
async def get_store_settings(service: ServiceDep):
    return await service.get_settings()


@router.put("", response_model=StoreSettings, dependencies=[Depends(require_admin)])
async def update_store_settings(payload: StoreSettingsUpdate, service: ServiceDep):
    """Partially update the settings; omitted fields keep their value."""
    return await service.update_settings(payload)
