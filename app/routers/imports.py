# =============================================================================
# app/routers/imports.py - Bulk Import Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from app.auth import require_admin
from app.dependencies import get_import_service
from app.exceptions import InvalidFileTypeError
from core.models.store import ImportResult
from core.services.import_service import ImportService

router = APIRouter(dependencies=[Depends(require_admin)])

ALLOWED_EXTENSIONS = [".csv"]


@router.post("/products", response_model=ImportResult)
async def import_products(
    file: Annotated[UploadFile, File(description="Product CSV")],
    service: Annotated[ImportService, Depends(get_import_service)],
):
    """
    Create products from a CSV file.

    Each row is imported on its own; failures are listed by row number
    and do not stop the remaining rows.
    """
    filename = file.filename or "products.csv"
    file_ext = "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if file_ext not in ALLOWED_EXTENSIONS:
        raise InvalidFileTypeError(filename, ALLOWED_EXTENSIONS)

    content = await file.read()
    return await service.import_products(content, filename)
