"""Report API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from complaints.api.dependencies import get_admin_user, get_report_service
from complaints.models.user import User
from complaints.schemas.report import ReportResponse
from complaints.services.report_service import ReportService

router = APIRouter(prefix="/api/report", tags=["reports"])


@router.get("", response_model=ReportResponse)
async def get_report(
    _admin: Annotated[User, Depends(get_admin_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
):
    """Get complaint totals by status and by category."""
    return ReportResponse.model_validate(service.summary())
