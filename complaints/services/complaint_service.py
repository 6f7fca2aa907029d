"""Complaint storage and lifecycle rules."""

import logging

from sqlalchemy.orm import Session, joinedload

from complaints.models.complaint import Complaint
from complaints.models.enums import ComplaintStatus
from complaints.models.user import User
from complaints.services.errors import (
    ForbiddenError,
    InvalidStatusError,
    NotFoundError,
    storage_errors,
)

logger = logging.getLogger(__name__)


class ComplaintService:
    """Service for complaint persistence and status transitions."""

    def __init__(self, db: Session, allow_reopen: bool = True):
        self.db = db
        self.allow_reopen = allow_reopen

    # Store operations

    def create(self, user_id: int, category: str, subject: str, description: str) -> Complaint:
        """Persist a new complaint in the initial Pending state."""
        with storage_errors(self.db, "load complaint owner"):
            owner = self.db.get(User, user_id)
        if owner is None:
            raise NotFoundError("User not found")

        complaint = Complaint(
            user_id=user_id,
            category=category,
            subject=subject,
            description=description,
            status=ComplaintStatus.PENDING.value,
        )
        self.db.add(complaint)
        self._commit("create complaint")
        self.db.refresh(complaint)
        return complaint

    def get(self, complaint_id: int) -> Complaint | None:
        """Get a complaint by id."""
        with storage_errors(self.db, "load complaint"):
            return self.db.get(Complaint, complaint_id)

    def list_all(self, newest_first: bool = True) -> list[Complaint]:
        """Get every complaint with its owner loaded."""
        with storage_errors(self.db, "list complaints"):
            query = self.db.query(Complaint).options(joinedload(Complaint.user))
            return query.order_by(*self._ordering(newest_first)).all()

    def list_by_user(self, user_id: int, newest_first: bool = True) -> list[Complaint]:
        """Get the complaints submitted by one user."""
        with storage_errors(self.db, "list user complaints"):
            query = self.db.query(Complaint).filter(Complaint.user_id == user_id)
            return query.order_by(*self._ordering(newest_first)).all()

    def update_status(self, complaint_id: int, new_status: ComplaintStatus) -> Complaint:
        """Overwrite a complaint's status. Last write wins."""
        complaint = self.get(complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint not found")

        complaint.status = new_status.value
        self._commit("update complaint status")
        self.db.refresh(complaint)
        return complaint

    # Lifecycle operations

    def submit(self, user_id: int, category: str, subject: str, description: str) -> Complaint:
        """Submit a complaint on behalf of the caller.

        The owner is always ``user_id`` and the status is always Pending;
        callers have no way to set either.
        """
        complaint = self.create(user_id, category, subject, description)
        logger.info(f"User {user_id} submitted complaint {complaint.id} ({category})")
        return complaint

    def change_status(self, caller_is_admin: bool, complaint_id: int, new_status: str) -> Complaint:
        """Move a complaint to ``new_status``.

        Checks run in order: the status value, then the caller's privilege,
        then the complaint's existence. Nothing is written unless all pass.
        """
        status = ComplaintStatus.parse(new_status)
        if status is None:
            raise InvalidStatusError()
        if not caller_is_admin:
            raise ForbiddenError()

        complaint = self.get(complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint not found")

        current = ComplaintStatus(complaint.status)
        if current == status:
            return complaint
        if current.is_terminal() and not self.allow_reopen:
            raise InvalidStatusError("Resolved complaints cannot be reopened")

        complaint = self.update_status(complaint_id, status)
        logger.info(f"Complaint {complaint_id} moved from {current.value} to {status.value}")
        return complaint

    # Helpers

    @staticmethod
    def _ordering(newest_first: bool) -> tuple:
        if newest_first:
            return (Complaint.created_at.desc(), Complaint.id.desc())
        return (Complaint.created_at.asc(), Complaint.id.asc())

    def _commit(self, action: str) -> None:
        with storage_errors(self.db, action):
            self.db.commit()
