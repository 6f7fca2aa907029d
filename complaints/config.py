"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./complaints.db")

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=60)

    # Password hashing cost factor
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # The single administrator is whoever registered with this email
    admin_email: str = Field(default="")

    # Complaint lifecycle
    allow_reopen: bool = Field(default=True)
    restrict_all_complaints_to_admin: bool = Field(default=False)

    # Single-page client
    frontend_dir: str = Field(default="frontend")
    cors_origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:5000"])

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.is_production:
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
            if not self.admin_email:
                raise ValueError("ADMIN_EMAIL must be set in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
