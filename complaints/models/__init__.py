"""SQLAlchemy models."""

from complaints.models.complaint import Complaint
from complaints.models.enums import ComplaintStatus
from complaints.models.user import User

__all__ = [
    "User",
    "Complaint",
    "ComplaintStatus",
]
