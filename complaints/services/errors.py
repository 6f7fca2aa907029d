"""Domain errors raised by the services and rendered by the API layer.

Each error carries the HTTP status code it maps to, so route handlers can let
them propagate and a single exception handler in ``complaints.main`` turns
them into ``{"message": ...}`` responses.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ComplaintsError(Exception):
    """Base exception for all complaint-service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# Authentication & authorization


class UnauthenticatedError(ComplaintsError):
    """No credential was supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token, authorization denied"


class InvalidTokenError(ComplaintsError):
    """Token is malformed, forged or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is not valid"


class ForbiddenError(ComplaintsError):
    """Authenticated, but not allowed to perform the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied: Admin required"


class InvalidCredentialsError(ComplaintsError):
    """Login failed. Unknown email and wrong password share this error."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid Credentials"


# Resources


class NotFoundError(ComplaintsError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateUserError(ComplaintsError):
    """Email is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


# Validation


class InvalidStatusError(ComplaintsError):
    """Status value is outside the complaint lifecycle."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid status value"


# Storage


class StorageError(ComplaintsError):
    """The underlying store failed. Details are logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise store failures inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Failed to {action}")
        raise StorageError() from e
