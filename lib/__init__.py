# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable infrastructure:
# - mongo_client.py: MongoDB connector (motor) for the document store
# - cloudinary_client.py: Image-hosting credentials and upload/delete calls
# - utils.py: Shared utilities (ObjectId parsing, serialization, slugs)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import MongoConnector, DatabaseConnectionError
from lib.cloudinary_client import CloudinaryClient
from lib.utils import parse_object_id, serialize_document, slugify, utcnow

__all__ = [
    # MongoDB
    "MongoConnector",
    "DatabaseConnectionError",
    # Cloudinary
    "CloudinaryClient",
    # Utils
    "parse_object_id",
    "serialize_document",
    "slugify",
    "utcnow",
]
