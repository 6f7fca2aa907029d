"""Authentication schemas."""

from email_validator import EmailNotValidError, validate_email
from pydantic import AliasChoices, BaseModel, Field, field_validator


def check_email_syntax(value: str) -> str:
    """Reject malformed addresses but keep the address exactly as typed."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}") from e
    return value


class UserRegister(BaseModel):
    """User registration request."""

    full_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("fullName", "full_name"),
    )
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, value: str) -> str:
        return check_email_syntax(value)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class RegisterResponse(BaseModel):
    """Registration response with a session token."""

    message: str
    token: str


class LoginResponse(BaseModel):
    """Login response with token, display name and derived role."""

    message: str
    token: str
    username: str
    role: str
