"""Aggregate reporting over the complaint store."""

from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from complaints.models.complaint import Complaint
from complaints.models.enums import ComplaintStatus
from complaints.services.errors import storage_errors


class ReportService:
    """Service for admin reports."""

    def __init__(self, db: Session):
        self.db = db

    def summary(self) -> dict[str, Any]:
        """Count complaints overall, by status and by category.

        Returns:
            {
                "total": int,
                "pending": int,
                "resolved": int,
                "complaints_by_category": [{"category": str, "count": int}]
            }
        """
        count_col = func.count(Complaint.id)
        with storage_errors(self.db, "build complaint report"):
            status_counts = dict(
                self.db.query(Complaint.status, count_col).group_by(Complaint.status).all()
            )
            by_category = (
                self.db.query(Complaint.category, count_col)
                .group_by(Complaint.category)
                .order_by(count_col.desc(), Complaint.category)
                .all()
            )

        return {
            "total": sum(status_counts.values()),
            "pending": status_counts.get(ComplaintStatus.PENDING.value, 0),
            "resolved": status_counts.get(ComplaintStatus.RESOLVED.value, 0),
            "complaints_by_category": [
                {"category": category, "count": count} for category, count in by_category
            ],
        }
