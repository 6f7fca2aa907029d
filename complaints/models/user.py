"""User model."""

from sqlalchemy import Column, Integer, String

from complaints.database import Base
from complaints.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and complaint ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
