"""Complaint schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ComplaintCreate(BaseModel):
    """Submit a new complaint.

    Owner and status are not accepted; unknown fields are ignored.
    """

    category: str = Field(..., max_length=255)
    subject: str = Field(..., max_length=255)
    description: str = Field(..., max_length=5000)

    @field_validator("category", "subject", "description")
    @classmethod
    def require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Field is required")
        return value


class ComplaintStatusUpdate(BaseModel):
    """Change a complaint's status. Validated against the lifecycle by the service."""

    status: str


class ComplaintOwner(BaseModel):
    """Minimal owner details shown on the admin dashboard."""

    model_config = ConfigDict(from_attributes=True)

    full_name: str = Field(..., serialization_alias="fullName")
    email: str


class ComplaintResponse(BaseModel):
    """Complaint response.

    Wire names follow the hosted client: ``_id`` (as a string) and ``date``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., serialization_alias="_id")
    user_id: int
    category: str
    subject: str
    description: str
    status: str
    created_at: datetime = Field(..., serialization_alias="date")
    updated_at: datetime

    @field_serializer("id")
    def serialize_id(self, value: int) -> str:
        return str(value)


class ComplaintWithOwnerResponse(ComplaintResponse):
    """Complaint response with the submitting user populated."""

    user: ComplaintOwner


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ComplaintStatusResponse(BaseModel):
    """Result of a status change."""

    message: str
    complaint: ComplaintResponse
