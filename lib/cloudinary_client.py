# =============================================================================
# lib/cloudinary_client.py - Cloudinary Client Wrapper
# =============================================================================
# Holds the image-hosting credentials and wraps the two SDK calls the
# storefront needs (upload, destroy).
#
# The Cloudinary SDK is synchronous; callers on the event loop should run
# these methods in a threadpool (see core/services/storage_service.py).
# =============================================================================

from __future__ import annotations

import io
import logging
from typing import Any

import cloudinary
import cloudinary.uploader

logger = logging.getLogger(__name__)


class CloudinaryClient:
    """
    Image-hosting client configurator.

    Missing credentials are not fatal: `configure()` logs an error and
    returns False, and later upload attempts are refused by the service
    layer.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "catering",
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.ready = False

    @classmethod
    def from_settings(cls, settings) -> CloudinaryClient:
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def configure(self) -> bool:
        """
        Push credentials into the SDK.

        Returns:
            True if all credentials were present, False otherwise
        """
        if not self.has_credentials:
            logger.error(
                "Cloudinary env missing! Set CLOUDINARY_CLOUD_NAME, "
                "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET"
            )
            self.ready = False
            return False

        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
            secure=True,
        )
        self.ready = True
        logger.info(f"Cloudinary ENV loaded (cloud: {self.cloud_name})")
        return True

    def upload(self, content: bytes, filename: str) -> dict[str, Any]:
        """Upload image bytes into the configured folder."""
        return cloudinary.uploader.upload(
            io.BytesIO(content),
            folder=self.folder,
            resource_type="image",
            filename_override=filename,
            use_filename=True,
            unique_filename=True,
        )

    def destroy(self, public_id: str) -> dict[str, Any]:
        """Delete an image by public id."""
        return cloudinary.uploader.destroy(public_id, resource_type="image")
