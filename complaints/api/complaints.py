"""Complaint API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from complaints.api.dependencies import (
    get_admin_user,
    get_complaint_feed_viewer,
    get_complaint_service,
    get_current_user_id,
)
from complaints.models.user import User
from complaints.schemas.complaint import (
    ComplaintCreate,
    ComplaintResponse,
    ComplaintStatusResponse,
    ComplaintStatusUpdate,
    ComplaintWithOwnerResponse,
    MessageResponse,
)
from complaints.services.complaint_service import ComplaintService

router = APIRouter(prefix="/api/complaints", tags=["complaints"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_complaint(
    complaint_data: ComplaintCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ComplaintService, Depends(get_complaint_service)],
):
    """Submit a new complaint as the current user."""
    service.submit(
        user_id,
        complaint_data.category,
        complaint_data.subject,
        complaint_data.description,
    )
    return MessageResponse(message="Complaint submitted successfully")


@router.get("/all", response_model=list[ComplaintWithOwnerResponse])
async def get_all_complaints(
    _viewer_id: Annotated[int, Depends(get_complaint_feed_viewer)],
    service: Annotated[ComplaintService, Depends(get_complaint_service)],
):
    """Get every complaint, newest first, with the submitting user."""
    return service.list_all()


@router.get("/my", response_model=list[ComplaintResponse])
async def get_my_complaints(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ComplaintService, Depends(get_complaint_service)],
):
    """Get the current user's complaints, newest first."""
    return service.list_by_user(user_id)


@router.put("/{complaint_id}/status", response_model=ComplaintStatusResponse)
async def update_complaint_status(
    complaint_id: int,
    status_data: ComplaintStatusUpdate,
    _admin: Annotated[User, Depends(get_admin_user)],
    service: Annotated[ComplaintService, Depends(get_complaint_service)],
):
    """Change a complaint's status (administrator only)."""
    complaint = service.change_status(True, complaint_id, status_data.status)
    return ComplaintStatusResponse(
        message=f"Complaint {complaint_id} updated to {complaint.status}",
        complaint=ComplaintResponse.model_validate(complaint),
    )
