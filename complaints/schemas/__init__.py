"""Pydantic schemas for API request/response validation."""

from complaints.schemas.auth import LoginResponse, RegisterResponse, UserLogin, UserRegister
from complaints.schemas.complaint import (
    ComplaintCreate,
    ComplaintOwner,
    ComplaintResponse,
    ComplaintStatusResponse,
    ComplaintStatusUpdate,
    ComplaintWithOwnerResponse,
    MessageResponse,
)
from complaints.schemas.report import CategoryCount, ReportResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "RegisterResponse",
    "LoginResponse",
    "ComplaintCreate",
    "ComplaintStatusUpdate",
    "ComplaintOwner",
    "ComplaintResponse",
    "ComplaintWithOwnerResponse",
    "ComplaintStatusResponse",
    "MessageResponse",
    "CategoryCount",
    "ReportResponse",
]
