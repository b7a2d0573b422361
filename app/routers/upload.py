# =============================================================================
# app/routers/upload.py - Image Upload Endpoints
# =============================================================================
# Admin-only image hosting for product, category and banner pictures.
# The returned URL is what clients store in the resource's image field.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from app.auth import require_admin
from app.dependencies import get_storage_service
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])

ServiceDep = Annotated[StorageService, Depends(get_storage_service)]


# =============================================================================
# Endpoints
# =============================================================================

@router.post("", status_code=201)
async def upload_image(
    file: Annotated[UploadFile, File(description="Image file (jpeg, png, webp, gif)")],
    service: ServiceDep,
):
    """
    Upload an image to the image host.

    Returns:
        url, public_id, width, height, format, bytes
    """
    filename = file.filename or "image"
    content = await file.read()
    logger.info(f"Processing image upload: {filename} ({len(content) / (1024 * 1024):.2f}MB)")

    return await service.upload_image(content, filename, file.content_type)


@router.delete("/{public_id:path}")
async def delete_image(public_id: str, service: ServiceDep):
    """
    Delete a hosted image.

    public_id may contain slashes (folder/name).
    """
    deleted = await service.delete_image(public_id)
    return {"public_id": public_id, "deleted": deleted}
