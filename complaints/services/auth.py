"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from complaints.config import Settings
from complaints.models.user import User
from complaints.services.errors import DuplicateUserError, InvalidTokenError, StorageError

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
USER_ROLE = "user"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


@lru_cache
def _dummy_password_hash() -> str:
    return pwd_context.hash("not-a-real-password")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Hash a password."""
    if rounds is None:
        return pwd_context.hash(password)
    return pwd_context.copy(bcrypt__rounds=rounds).hash(password)


def create_access_token(user_id: int, settings: Settings, issued_at: datetime | None = None) -> str:
    """Create a JWT access token carrying the user id."""
    issued_at = issued_at or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "user": {"id": user_id},
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """Decode and validate a JWT token, returning the user id it was issued for."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidTokenError() from e

    user = payload.get("user")
    if not isinstance(user, dict) or not isinstance(user.get("id"), int):
        raise InvalidTokenError()
    return user["id"]


def resolve_role(user: User, admin_email: str) -> str:
    """Derive the user's role from the configured administrator email."""
    if admin_email and user.email == admin_email:
        return ADMIN_ROLE
    return USER_ROLE


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.get(User, user_id)


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        # Unknown emails still cost one bcrypt verification
        verify_password(password, _dummy_password_hash())
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def register_user(
    db: Session, full_name: str, email: str, password: str, rounds: int | None = None
) -> User:
    """Create a new user, refusing emails that are already registered."""
    if get_user_by_email(db, email):
        raise DuplicateUserError()

    user = User(full_name=full_name, email=email, password_hash=get_password_hash(password, rounds))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise DuplicateUserError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to store new user")
        raise StorageError() from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
