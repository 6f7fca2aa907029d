"""Tests for complaint storage and the status lifecycle."""

import pytest
from sqlalchemy.exc import OperationalError

from complaints.models.complaint import Complaint
from complaints.models.enums import ComplaintStatus
from complaints.services.auth import register_user
from complaints.services.complaint_service import ComplaintService
from complaints.services.errors import (
    ForbiddenError,
    InvalidStatusError,
    NotFoundError,
    StorageError,
)


@pytest.fixture
def alice(db):
    return register_user(db, "Alice", "alice@x.com", "secret1", rounds=4)


@pytest.fixture
def bob(db):
    return register_user(db, "Bob", "bob@x.com", "secret2", rounds=4)


@pytest.fixture
def service(db):
    return ComplaintService(db)


class TestComplaintStatus:
    """Tests for the status enum."""

    def test_parse_known_values(self):
        assert ComplaintStatus.parse("Pending") is ComplaintStatus.PENDING
        assert ComplaintStatus.parse("Resolved") is ComplaintStatus.RESOLVED

    @pytest.mark.parametrize("value", ["pending", "Closed", "", "RESOLVED"])
    def test_parse_rejects_other_values(self, value):
        assert ComplaintStatus.parse(value) is None


class TestSubmit:
    """Tests for submitting and listing complaints."""

    def test_submit_starts_pending_and_owned_by_caller(self, service, alice):
        complaint = service.submit(alice.id, "Billing", "Late fee", "Charged twice")

        assert complaint.id is not None
        assert complaint.status == "Pending"
        assert complaint.user_id == alice.id
        assert complaint.created_at is not None

    def test_submit_for_missing_user(self, service, db):
        with pytest.raises(NotFoundError):
            service.submit(9999, "Billing", "Late fee", "Charged twice")

        assert db.query(Complaint).count() == 0

    def test_list_by_user(self, service, alice, bob):
        first = service.submit(alice.id, "Billing", "First", "...")
        second = service.submit(alice.id, "Network", "Second", "...")
        service.submit(bob.id, "Billing", "Bob's", "...")

        assert [c.id for c in service.list_by_user(alice.id)] == [second.id, first.id]
        assert [c.id for c in service.list_by_user(alice.id, newest_first=False)] == [
            first.id,
            second.id,
        ]

    def test_list_all_loads_owner(self, service, alice, bob):
        service.submit(alice.id, "Billing", "Alice's", "...")
        service.submit(bob.id, "Billing", "Bob's", "...")

        complaints = service.list_all()
        assert [c.subject for c in complaints] == ["Bob's", "Alice's"]
        assert [c.user.email for c in complaints] == ["bob@x.com", "alice@x.com"]


class TestChangeStatus:
    """Tests for status transitions."""

    def test_admin_resolves(self, service, alice):
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")

        updated = service.change_status(True, complaint.id, "Resolved")

        assert updated.status == "Resolved"
        assert service.list_by_user(alice.id)[0].status == "Resolved"

    def test_invalid_status_never_writes(self, service, alice):
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")

        for caller_is_admin in (True, False):
            with pytest.raises(InvalidStatusError):
                service.change_status(caller_is_admin, complaint.id, "Closed")

        assert service.get(complaint.id).status == "Pending"

    def test_non_admin_is_forbidden(self, service, alice):
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")

        with pytest.raises(ForbiddenError):
            service.change_status(False, complaint.id, "Resolved")

        assert service.get(complaint.id).status == "Pending"

    def test_missing_complaint(self, service):
        with pytest.raises(NotFoundError):
            service.change_status(True, 9999, "Resolved")

    def test_update_status_missing_complaint(self, service):
        with pytest.raises(NotFoundError):
            service.update_status(9999, ComplaintStatus.RESOLVED)

    def test_reopen_allowed_by_default(self, service, alice):
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")
        service.change_status(True, complaint.id, "Resolved")

        reopened = service.change_status(True, complaint.id, "Pending")

        assert reopened.status == "Pending"

    def test_reopen_can_be_disabled(self, db, alice):
        service = ComplaintService(db, allow_reopen=False)
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")
        service.change_status(True, complaint.id, "Resolved")

        with pytest.raises(InvalidStatusError, match="cannot be reopened"):
            service.change_status(True, complaint.id, "Pending")

        assert service.get(complaint.id).status == "Resolved"

    def test_same_status_is_a_no_op(self, db, alice):
        service = ComplaintService(db, allow_reopen=False)
        complaint = service.submit(alice.id, "Billing", "Late fee", "...")
        service.change_status(True, complaint.id, "Resolved")

        assert service.change_status(True, complaint.id, "Resolved").status == "Resolved"


class TestStorageFailures:
    """Tests for store errors surfacing as StorageError."""

    def test_commit_failure_is_rolled_back(self, service, db, alice, monkeypatch):
        def failing_commit():
            raise OperationalError("UPDATE complaints", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", failing_commit)

        with pytest.raises(StorageError) as exc_info:
            service.submit(alice.id, "Billing", "Late fee", "...")

        assert exc_info.value.message == "Server error"
        assert "disk" not in str(exc_info.value)

    def test_read_failure_surfaces_as_storage_error(self, service, db, alice, monkeypatch):
        service.submit(alice.id, "Billing", "Late fee", "...")

        def failing_query(*args, **kwargs):
            raise OperationalError("SELECT complaints", {}, Exception("database is locked"))

        monkeypatch.setattr(db, "query", failing_query)

        with pytest.raises(StorageError):
            service.list_all()
        with pytest.raises(StorageError):
            service.list_by_user(alice.id)
