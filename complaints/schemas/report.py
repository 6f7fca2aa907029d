"""Report schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCount(BaseModel):
    """Number of complaints filed under one category."""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(..., alias="_id")
    count: int


class ReportResponse(BaseModel):
    """Complaint totals for the admin report."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    pending: int
    resolved: int
    complaints_by_category: list[CategoryCount] = Field(..., alias="complaintsByCategory")
