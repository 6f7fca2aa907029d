"""Complaint model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from complaints.database import Base
from complaints.models.enums import ComplaintStatus
from complaints.models.mixins import TimestampMixin

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in ComplaintStatus)


class Complaint(Base, TimestampMixin):
    """A complaint submitted by a user and tracked through its status lifecycle."""

    __tablename__ = "complaints"
    __table_args__ = (CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_complaints_status"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(255), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=ComplaintStatus.PENDING.value,
        server_default=ComplaintStatus.PENDING.value,
        index=True,
    )

    # Relationships
    user = relationship("User", backref="complaints")
