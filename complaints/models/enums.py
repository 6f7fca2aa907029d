"""Enums for model fields."""

from enum import Enum


class ComplaintStatus(str, Enum):
    """Lifecycle states of a complaint."""

    PENDING = "Pending"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value: str) -> "ComplaintStatus | None":
        """Return the matching status, or None for anything outside the lifecycle."""
        try:
            return cls(value)
        except ValueError:
            return None

    def is_terminal(self) -> bool:
        """Check if this status closes the complaint."""
        return self == ComplaintStatus.RESOLVED
