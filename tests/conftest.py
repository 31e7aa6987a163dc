import os

# Settings are read at import time; provide test values before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from app.database import get_db
from app.models.base import Base
from app.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from app.models.post import Post
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

POSTS_URL = "/api/admin/posts"


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        # Same unit-of-work rules as app.database.get_db
        try:
            yield db_session
        except BaseException:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    user_id: str | None = "test-user-123", expired: bool = False, **extra_claims
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim (None leaves the claim out)
        expired: If True, create expired token
        extra_claims: Additional claims to embed

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"exp": exp, "iat": datetime.now(UTC), **extra_claims}
    if user_id is not None:
        payload["sub"] = user_id

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mock_jwt_token():
    """Generate valid JWT token"""
    return create_test_token()


@pytest.fixture
def auth_headers(mock_jwt_token):
    """Authorization headers for authenticated requests"""
    return bearer(mock_jwt_token)


@pytest.fixture
def user_a_headers():
    """Authorization headers for user A"""
    return bearer(create_test_token(user_id="user-a"))


@pytest.fixture
def user_b_headers():
    """Authorization headers for user B"""
    return bearer(create_test_token(user_id="user-b"))


@pytest.fixture
def make_post(db_session):
    """Insert a post directly, bypassing the API"""

    def _make_post(author_id: str = "user-a", title: str = "Title", content: str = "Content", **kwargs):
        post = Post(author_id=author_id, title=title, content=content, **kwargs)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post
