# =============================================================================
# core/models/common.py - Shared Response Shapes
# =============================================================================

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One page of a list endpoint.

    Example:
        {"items": [...], "total": 57, "page": 1, "limit": 20}
    """
    items: list[T]
    total: int
    page: int
    limit: int


class DeleteResponse(BaseModel):
    id: str
    message: str
