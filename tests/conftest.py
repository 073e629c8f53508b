"""Test configuration and fixtures."""

from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from content_review_hub.api import app
from content_review_hub.db import audit_models, models  # noqa: F401
from content_review_hub.db.base import Base, get_db
from content_review_hub.review.identity import Identity
from content_review_hub.review.services import SqlAssetStore

# One in-memory database shared across connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db() -> Generator[Session, None, None]:
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def _reset_database() -> Generator[None, None, None]:
    """Give every test empty tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(db_session: Session) -> SqlAssetStore:
    return SqlAssetStore(db_session)


@pytest.fixture
def identity() -> Identity:
    return Identity(user_id="user-1", email="alex@example.com")
