"""
Pytest configuration and fixtures for SocialDash API tests.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from socialdash.config import get_settings
from socialdash.database import Base, get_db
from socialdash.dependencies import build_stores, get_stores
from socialdash.limiter import limiter
from socialdash.main import app
from socialdash.models.user import User
from socialdash.auth import get_password_hash, create_access_token
from socialdash.seed_data import SeedDataset, platform_catalog_only

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


class FakeClock:
    """Controllable clock for store tests."""

    def __init__(self, start=None):
        self.current = start or datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.current

    def advance(self, **kwargs):
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture(scope="function")
def session_factory():
    """Fresh tables for each test."""
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def clock():
    return FakeClock()


@pytest.fixture(scope="function")
def stores(session_factory, clock):
    """Stores seeded with the demo dataset."""
    return build_stores(session_factory, get_settings(), seed=SeedDataset(), clock=clock)


@pytest.fixture(scope="function")
def empty_stores(session_factory, clock):
    """Stores whose partitions start without posts."""
    return build_stores(session_factory, get_settings(), seed=platform_catalog_only(), clock=clock)


def _make_client(session_factory, selected_stores):
    def get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_stores] = lambda: selected_stores
    return TestClient(app)


@pytest.fixture(scope="function")
def client(session_factory, stores):
    """Test client backed by demo-seeded stores."""
    with _make_client(session_factory, stores) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def empty_client(session_factory, empty_stores):
    """Test client whose partitions start without posts."""
    with _make_client(session_factory, empty_stores) as c:
        yield c
    app.dependency_overrides.clear()


def make_user(db, email="test@example.com", password="testpassword123", display_name="Test User"):
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        display_name=display_name,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def user_factory(db):
    def factory(**kwargs):
        return make_user(db, **kwargs)
    return factory


@pytest.fixture(scope="function")
def test_user(db):
    """Create a test user."""
    return make_user(db)


@pytest.fixture(scope="function")
def auth_headers(test_user):
    """Get auth headers for the test user."""
    token = create_access_token({"sub": str(test_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def tomorrow(clock):
    return clock() + timedelta(days=1)
