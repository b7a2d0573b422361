# =============================================================================
# core/services/repository.py - Shared MongoDB CRUD
# =============================================================================
# Base class for the per-collection services. Handles ObjectId parsing,
# timestamps, pagination and serialization so the resource services only
# carry their own rules.
# =============================================================================

import logging
from datetime import datetime
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.exceptions import NotFoundError
from lib.utils import parse_object_id, serialize_document, to_storage_datetime, utcnow

logger = logging.getLogger(__name__)


def _prepare(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize values before they are written to Mongo."""
    prepared = {}
    for key, value in data.items():
        if isinstance(value, datetime):
            value = to_storage_datetime(value)
        prepared[key] = value
    return prepared


class MongoRepository:
    """
    CRUD over a single collection.

    Subclasses set `collection_name` and `resource` (used in error
    messages and Content-Range headers).
    """

    collection_name: str = ""
    resource: str = "document"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.collection_name]

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def find_page(
        self,
        query: dict[str, Any] | None = None,
        skip: int = 0,
        limit: int = 20,
        sort: list[tuple[str, int]] | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        Fetch one page of documents.

        Returns:
            Tuple of (serialized documents, total matching count)
        """
        query = query or {}
        total = await self.collection.count_documents(query)

        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        cursor = cursor.skip(skip).limit(limit)
        docs = await cursor.to_list(length=limit)

        logger.debug(f"Listed {len(docs)}/{total} {self.collection_name}")
        return [serialize_document(doc) for doc in docs], total

    async def get(self, document_id: str) -> dict[str, Any]:
        """
        Fetch a document by id.

        Raises:
            NotFoundError: If the id is malformed or unknown
        """
        oid = parse_object_id(document_id)
        if oid is None:
            raise NotFoundError(self.resource, document_id)

        doc = await self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFoundError(self.resource, document_id)
        return serialize_document(doc)

    async def exists(self, query: dict[str, Any]) -> bool:
        return await self.collection.find_one(query, {"_id": 1}) is not None

    async def reference_exists(self, collection_name: str, document_id: str | None) -> bool:
        """Check that `document_id` names a document in another collection."""
        oid = parse_object_id(document_id) if document_id else None
        if oid is None:
            return False
        return await self.db[collection_name].find_one({"_id": oid}, {"_id": 1}) is not None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a document, stamping created_at/updated_at."""
        now = utcnow()
        doc = {**_prepare(data), "created_at": now, "updated_at": now}

        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Created {self.resource} {result.inserted_id}")
        return serialize_document(doc)

    async def update(self, document_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the id is malformed or unknown
        """
        if not data:
            return await self.get(document_id)

        oid = parse_object_id(document_id)
        if oid is None:
            raise NotFoundError(self.resource, document_id)

        doc = await self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {**_prepare(data), "updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError(self.resource, document_id)

        logger.info(f"Updated {self.resource} {document_id}: {sorted(data)}")
        return serialize_document(doc)

    async def delete(self, document_id: str) -> None:
        """
        Delete a document.

        Raises:
            NotFoundError: If the id is malformed or unknown
        """
        oid = parse_object_id(document_id)
        if oid is None:
            raise NotFoundError(self.resource, document_id)

        result = await self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFoundError(self.resource, document_id)

        logger.info(f"Deleted {self.resource} {document_id}")
