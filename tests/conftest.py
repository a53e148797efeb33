"""Pytest fixtures for testing"""

import os

# Must be set before the app's engine is created
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-for-the-pytest-suite-only")

import uuid
import pytest
from typing import Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finance_api.api.main import create_app
from finance_api.api.dependencies import get_current_user_id
from finance_api.infrastructure.database.models import Base, User
from finance_api.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def _make_user(db: Session, name: str, email: str) -> User:
    user = User(name=name, email=email, password_hash="not-a-real-hash")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def owner(db: Session) -> User:
    """User the default `client` acts as"""
    return _make_user(db, "Owner", "owner@example.com")


@pytest.fixture
def other_owner(db: Session) -> User:
    return _make_user(db, "Other", "other@example.com")


def _make_client(db: Session, user_id: Optional[uuid.UUID] = None) -> TestClient:
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    if user_id is not None:
        app.dependency_overrides[get_current_user_id] = lambda: user_id
    return TestClient(app)


@pytest.fixture
def client(db: Session, owner: User) -> TestClient:
    """Create FastAPI test client authenticated as `owner`"""
    return _make_client(db, owner.id)


@pytest.fixture
def other_client(db: Session, other_owner: User) -> TestClient:
    """Test client authenticated as a second, unrelated user"""
    return _make_client(db, other_owner.id)


@pytest.fixture
def anonymous_client(db: Session) -> TestClient:
    """Test client going through real token authentication"""
    return _make_client(db)
