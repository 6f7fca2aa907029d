"""FastAPI dependencies for authentication, authorization and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from complaints.config import Settings, get_settings
from complaints.database import get_db
from complaints.models.user import User
from complaints.services.auth import ADMIN_ROLE, decode_access_token, get_user_by_id, resolve_role
from complaints.services.complaint_service import ComplaintService
from complaints.services.errors import ForbiddenError, NotFoundError, UnauthenticatedError
from complaints.services.report_service import ReportService

TOKEN_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def get_current_user_id(
    token: Annotated[str | None, Depends(token_header)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int:
    """Authenticated guard: verify the session token and return its user id."""
    if not token:
        raise UnauthenticatedError()
    return decode_access_token(token, settings)


def get_admin_user(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    """Administrator guard: the token's user must be the configured admin."""
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    if resolve_role(user, settings.admin_email) != ADMIN_ROLE:
        raise ForbiddenError()
    return user


def get_complaint_feed_viewer(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int:
    """Guard for the all-complaints feed.

    Any authenticated user may read it unless the deployment restricts it to
    the administrator.
    """
    if settings.restrict_all_complaints_to_admin:
        get_admin_user(user_id, db, settings)
    return user_id


def get_complaint_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ComplaintService:
    """Get complaint service with dependencies."""
    return ComplaintService(db, allow_reopen=settings.allow_reopen)


def get_report_service(
    db: Annotated[Session, Depends(get_db)],
) -> ReportService:
    """Get report service with dependencies."""
    return ReportService(db)
