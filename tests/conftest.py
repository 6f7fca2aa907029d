"""Pytest configuration and fixtures."""

import os

# Point the application at the test database before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from complaints.config import Settings, get_settings  # noqa: E402
from complaints.database import Base, get_db  # noqa: E402
from complaints.main import app  # noqa: E402
from complaints.services.auth import decode_access_token  # noqa: E402

ADMIN_EMAIL = "admin@example.com"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def settings():
    """Test settings; tests may flip flags on this instance."""
    return Settings(
        database_url=SQLALCHEMY_DATABASE_URL,
        jwt_secret="test-secret",  # noqa: S106
        admin_email=ADMIN_EMAIL,
        bcrypt_rounds=4,
    )


@pytest.fixture(scope="function")
def client(db, settings):
    """Create a test client with database and settings overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client, settings, full_name: str, email: str, password: str) -> AuthHeaders:
    response = client.post(
        "/api/register",
        json={"fullName": full_name, "email": email, "password": password},
    )
    assert response.status_code == 201
    token = response.json()["token"]
    user_id = decode_access_token(token, settings)
    return AuthHeaders({"x-auth-token": token}, user_id=user_id, email=email)


@pytest.fixture
def auth_headers(client, settings):
    """Create a regular user and return auth headers with user info."""
    return _register(client, settings, "Test User", "test@example.com", "testpass123")


@pytest.fixture
def other_auth_headers(client, settings):
    """Create a second regular user."""
    return _register(client, settings, "Other User", "other@example.com", "otherpass123")


@pytest.fixture
def admin_headers(client, settings):
    """Create the configured administrator and return auth headers."""
    return _register(client, settings, "Admin User", ADMIN_EMAIL, "adminpass123")
