# =============================================================================
# app/routers/reports.py - Sales Report Endpoints
# =============================================================================

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.auth import require_admin
from app.dependencies import get_report_service
from app.exceptions import BadRequestError
from core.models.store import SalesReport
from core.services.report_service import ReportService
from lib.utils import to_storage_datetime

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/sales", response_model=SalesReport)
async def sales_report(
    service: Annotated[ReportService, Depends(get_report_service)],
    start: Annotated[datetime | None, Query(description="Inclusive start (ISO 8601)")] = None,
    end: Annotated[datetime | None, Query(description="Inclusive end (ISO 8601)")] = None,
):
    """
    Order count, revenue, status breakdown, daily totals and top products.

    Cancelled orders are counted in by_status but excluded from revenue.
    """
    if start and end and to_storage_datetime(end) < to_storage_datetime(start):
        raise BadRequestError(
            "end must not be before start",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    return await service.sales_report(start=start, end=end)
