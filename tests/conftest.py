import os

# Must be set before app modules read their configuration
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db.config import get_session
from app.db.init import init_db
from app.main import app
from app.middleware.auth import get_token_service
from app.routers.users import get_password_hasher
from app.services.security import PasswordHasher, TokenService

TEST_SECRET = "test-jwt-secret-key"


def make_token(user_id, expires_in: int = 3600, secret: str = TEST_SECRET) -> str:
    """Sign a token the way a foreign issuer would, independent of TokenService."""
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def engine():
    """In-memory SQLite shared across connections via StaticPool."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret=TEST_SECRET, algorithm="HS256", expires_in=3600)


@pytest.fixture
def client(engine, hasher, tokens):
    """FastAPI test client bound to the in-memory database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_service] = lambda: tokens

    yield TestClient(app)

    app.dependency_overrides.clear()
