# =============================================================================
# core/services/storage_service.py - Image Hosting Operations
# =============================================================================
# Handles image upload/delete against Cloudinary.
# The SDK is blocking, so each call runs in a worker thread.
# =============================================================================

import asyncio
import logging
from typing import Any

from app.exceptions import (
    InvalidFileTypeError,
    MediaDeleteError,
    MediaNotConfiguredError,
    MediaUploadError,
)
from lib.cloudinary_client import CloudinaryClient

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = ["image/jpeg", "image/png", "image/webp", "image/gif"]


class StorageService:
    """
    Service for image storage.

    Wraps a configured CloudinaryClient; refuses work when the client
    was never given credentials.
    """

    def __init__(self, client: CloudinaryClient):
        self.client = client

    async def upload_image(
        self,
        content: bytes,
        filename: str,
        content_type: str | None,
    ) -> dict[str, Any]:
        """
        Upload an image.

        Args:
            content: Image bytes
            filename: Original filename
            content_type: MIME type reported by the client

        Returns:
            Dict with url, public_id, width, height, format, bytes

        Raises:
            InvalidFileTypeError: If the file is not a supported image type
            MediaNotConfiguredError: If Cloudinary credentials are missing
            MediaUploadError: If Cloudinary rejects the upload
        """
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidFileTypeError(filename, ALLOWED_IMAGE_TYPES)
        if not self.client.ready:
            raise MediaNotConfiguredError()

        try:
            result = await asyncio.to_thread(self.client.upload, content, filename)
        except Exception as e:
            logger.error(f"Image upload failed: {e}")
            raise MediaUploadError(str(e)) from e

        logger.info(f"Uploaded image: {result.get('public_id')} ({len(content)} bytes)")
        return {
            "url": result.get("secure_url") or result.get("url"),
            "public_id": result.get("public_id"),
            "width": result.get("width"),
            "height": result.get("height"),
            "format": result.get("format"),
            "bytes": result.get("bytes", len(content)),
        }

    async def delete_image(self, public_id: str) -> bool:
        """
        Delete an image.

        Returns:
            True if Cloudinary deleted it, False if it did not exist

        Raises:
            MediaNotConfiguredError: If Cloudinary credentials are missing
            MediaDeleteError: If the delete call fails
        """
        if not self.client.ready:
            raise MediaNotConfiguredError()

        try:
            result = await asyncio.to_thread(self.client.destroy, public_id)
        except Exception as e:
            logger.error(f"Image delete failed: {e}")
            raise MediaDeleteError(public_id, str(e)) from e

        deleted = result.get("result") == "ok"
        logger.info(f"Delete image {public_id}: {result.get('result')}")
        return deleted
