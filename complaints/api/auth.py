"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from complaints.config import Settings, get_settings
from complaints.database import get_db
from complaints.schemas.auth import LoginResponse, RegisterResponse, UserLogin, UserRegister
from complaints.services.auth import (
    authenticate_user,
    create_access_token,
    register_user,
    resolve_role,
)
from complaints.services.errors import InvalidCredentialsError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user."""
    user = register_user(
        db, user_data.full_name, user_data.email, user_data.password, settings.bcrypt_rounds
    )

    return RegisterResponse(
        message="User registered successfully",
        token=create_access_token(user.id, settings),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    return LoginResponse(
        message="Login successful",
        token=create_access_token(user.id, settings),
        username=user.full_name,
        role=resolve_role(user, settings.admin_email),
    )
