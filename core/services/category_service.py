# =============================================================================
# core/services/category_service.py - Category Tree Business Logic
# =============================================================================
# One service per level of the catalog tree. Each level knows its parent
# (which must exist on write) and its children (which block deletion).
#
#   CategoryService        categories        -> subcategories
#   SubcategoryService     subcategories     -> subsubcategories
#   SubSubcategoryService  subsubcategories  -> (leaf)
# =============================================================================

import logging
from typing import Any

from pydantic import BaseModel

from app.exceptions import BadRequestError, ConflictError
from core.services.repository import MongoRepository
from lib.utils import parse_object_id, slugify

logger = logging.getLogger(__name__)


class CategoryService(MongoRepository):
    """Top-level categories."""

    collection_name = "categories"
    resource = "category"

    # (collection, field) of the parent reference, None for the root level
    parent: tuple[str, str] | None = None
    # (collection, field) of documents that point at this level
    children: tuple[str, str] | None = ("subcategories", "category_id")
    # product field that references this level
    product_field = "category_id"

    async def list_entries(
        self,
        parent_id: str | None = None,
        active: bool | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[dict[str, Any]], int]:
        query: dict[str, Any] = {}
        if parent_id and self.parent:
            query[self.parent[1]] = parent_id
        if active is not None:
            query["is_active"] = active
        return await self.find_page(query, skip=skip, limit=limit, sort=[("name", 1)])

    async def create_entry(self, payload: BaseModel) -> dict[str, Any]:
        """
        Create an entry, deriving the slug from the name when omitted.

        Raises:
            BadRequestError: If the parent does not exist or no slug can be built
            ConflictError: If the slug is already taken
        """
        data = payload.model_dump()
        data["slug"] = data.get("slug") or slugify(data["name"])
        if not data["slug"]:
            raise BadRequestError(
                f"Cannot derive a slug from name '{data['name']}'",
                suggestion="Provide an explicit slug",
            )

        await self._check_slug_free(data["slug"])
        await self._check_parent(data)
        return await self.create(data)

    async def update_entry(self, entry_id: str, payload: BaseModel) -> dict[str, Any]:
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "slug" in data:
            await self._check_slug_free(data["slug"], exclude_id=entry_id)
        await self._check_parent(data)
        return await self.update(entry_id, data)

    async def delete_entry(self, entry_id: str) -> None:
        """
        Delete an entry that has no children and no products.

        Raises:
            ConflictError: If anything still references the entry
        """
        await self.get(entry_id)

        if self.children:
            collection, field = self.children
            if await self.db[collection].find_one({field: entry_id}, {"_id": 1}):
                raise ConflictError(
                    f"Cannot delete {self.resource} {entry_id}: it still has {collection}",
                    code=f"{self.resource.upper()}_HAS_CHILDREN",
                    details={"id": entry_id, "children": collection},
                )

        if await self.db["products"].find_one({self.product_field: entry_id}, {"_id": 1}):
            raise ConflictError(
                f"Cannot delete {self.resource} {entry_id}: products still reference it",
                code=f"{self.resource.upper()}_HAS_PRODUCTS",
                details={"id": entry_id},
            )

        await self.delete(entry_id)

    async def get_by_slug_or_id(self, value: str) -> dict[str, Any] | None:
        """Resolve a slug or id. Used by the product importer."""
        value = value.strip()
        query: dict[str, Any] = {"slug": value.lower()}
        oid = parse_object_id(value)
        if oid is not None:
            query = {"$or": [{"_id": oid}, query]}

        doc = await self.collection.find_one(query)
        if doc is None:
            return None
        return await self.get(str(doc["_id"]))

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    async def _check_slug_free(self, slug: str, exclude_id: str | None = None) -> None:
        query: dict[str, Any] = {"slug": slug}
        oid = parse_object_id(exclude_id) if exclude_id else None
        if oid is not None:
            query["_id"] = {"$ne": oid}

        if await self.exists(query):
            raise ConflictError(
                f"A {self.resource} with slug '{slug}' already exists",
                code="SLUG_TAKEN",
                details={"slug": slug},
            )

    async def _check_parent(self, data: dict[str, Any]) -> None:
        if not self.parent:
            return

        collection, field = self.parent
        if field not in data:
            return

        if not await self.reference_exists(collection, data[field]):
            raise BadRequestError(
                f"Parent not found: {data[field]}",
                suggestion=f"Create the parent in /api/{collection} first",
                details={field: data[field]},
            )


class SubcategoryService(CategoryService):
    """Second level: belongs to a category."""

    collection_name = "subcategories"
    resource = "subcategory"
    parent = ("categories", "category_id")
    children = ("subsubcategories", "subcategory_id")
    product_field = "subcategory_id"


class SubSubcategoryService(CategoryService):
    """Third level: belongs to a subcategory."""

    collection_name = "subsubcategories"
    resource = "subsubcategory"
    parent = ("subcategories", "subcategory_id")
    children = None
    product_field = "subsubcategory_id"
