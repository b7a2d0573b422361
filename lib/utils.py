# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - ObjectId parsing for path parameters
# - Document serialization (Mongo -> API dicts)
# - UTC datetime helpers (Mongo stores naive UTC datetimes)
# - Slug generation for catalog entries
# =============================================================================

import re
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def parse_object_id(value: str | ObjectId) -> ObjectId | None:
    """
    Parse a string into an ObjectId.

    Returns None for malformed ids so callers can answer 404 rather
    than letting a bson error bubble up as a 500.

    Example:
        parse_object_id("65a1f0c2e4b0a1b2c3d4e5f6")  # ObjectId(...)
        parse_object_id("not-an-id")                 # None
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


# =============================================================================
# Datetime Utilities
# =============================================================================

def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form pymongo round-trips."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_storage_datetime(value: datetime | None) -> datetime | None:
    """Normalize an aware or naive datetime to naive UTC for storage and queries."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def to_api_datetime(value: datetime) -> datetime:
    """Mark a stored naive UTC datetime as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# Document Serialization
# =============================================================================

def serialize_document(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """
    Convert a raw Mongo document into an API dict.

    - `_id` becomes a string `id`
    - ObjectId values become strings
    - datetimes are marked as UTC

    Nested dicts and lists are converted recursively.
    """
    if doc is None:
        return None

    result: dict[str, Any] = {}
    for key, value in doc.items():
        if key == "_id":
            result["id"] = str(value)
        else:
            result[key] = _serialize_value(value)
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return to_api_datetime(value)
    if isinstance(value, dict):
        return serialize_document(value)
    if isinstance(value, list):
        return [_serialize_value(v) for v in value]
    return value


# =============================================================================
# Slugs
# =============================================================================

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Build a URL slug from a display name.

    Example:
        slugify("Party Platters & Trays")  # "party-platters-trays"
    """
    return _SLUG_INVALID.sub("-", value.strip().lower()).strip("-")
