# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles product CRUD and catalog filtering.
# Category references are checked on every write so a product never points
# at a category that does not exist.
# =============================================================================

import logging
import re
from typing import Any

from app.exceptions import BadRequestError
from core.models.product import ProductCreate, ProductUpdate
from core.services.repository import MongoRepository

logger = logging.getLogger(__name__)

# product field -> collection it references
REFERENCES = {
    "category_id": "categories",
    "subcategory_id": "subcategories",
    "subsubcategory_id": "subsubcategories",
}


class ProductService(MongoRepository):
    """Service for catalog products."""

    collection_name = "products"
    resource = "product"

    async def list_products(
        self,
        category: str | None = None,
        subcategory: str | None = None,
        subsubcategory: str | None = None,
        search: str | None = None,
        featured: bool | None = None,
        available: bool | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List products matching the given filters, newest first.

        Args:
            category / subcategory / subsubcategory: Filter by tree node id
            search: Case-insensitive substring match on the name
            featured / available: Boolean flags
        """
        query: dict[str, Any] = {}
        if category:
            query["category_id"] = category
        if subcategory:
            query["subcategory_id"] = subcategory
        if subsubcategory:
            query["subsubcategory_id"] = subsubcategory
        if search:
            query["name"] = {"$regex": re.escape(search.strip()), "$options": "i"}
        if featured is not None:
            query["is_featured"] = featured
        if available is not None:
            query["is_available"] = available

        return await self.find_page(query, skip=skip, limit=limit, sort=[("created_at", -1)])

    async def create_product(self, payload: ProductCreate) -> dict[str, Any]:
        """
        Create a product.

        Raises:
            BadRequestError: If a referenced category does not exist
        """
        data = payload.model_dump()
        await self._check_references(data)
        return await self.create(data)

    async def update_product(self, product_id: str, payload: ProductUpdate) -> dict[str, Any]:
        data = payload.model_dump(exclude_unset=True)
        # category_id is required on the document, it can be moved but not cleared
        if data.get("category_id", "") is None:
            del data["category_id"]

        await self.get(product_id)
        await self._check_references(data)
        return await self.update(product_id, data)

    async def delete_product(self, product_id: str) -> None:
        await self.delete(product_id)

    async def _check_references(self, data: dict[str, Any]) -> None:
        for field, collection in REFERENCES.items():
            value = data.get(field)
            if value is None:
                continue
            if not await self.reference_exists(collection, value):
                raise BadRequestError(
                    f"Unknown {field.removesuffix('_id')}: {value}",
                    suggestion=f"Use an id returned by /api/{collection}",
                    details={field: value},
                )
