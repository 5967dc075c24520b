"""Pytest configuration and shared fixtures.

This module provides:
- An in-memory SQLite engine shared across threads (StaticPool)
- A database session fixture for crud/service tests
- A FastAPI TestClient with the database dependency overridden
- User and auth-header factories
"""

# Set environment variables BEFORE any imports that trigger Settings validation
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from growth_tracker import models  # noqa: F401
from growth_tracker.core.config import Base, create_db_engine, get_db
from growth_tracker.crud.user import crud_user
from growth_tracker.models.user import User
from growth_tracker.schemas.user import UserCreate
from main import app

from factories import DEFAULT_PASSWORD


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    """Create users directly through the CRUD layer."""

    def _make_user(
        username: str = "alice",
        email: str = None,
        password: str = DEFAULT_PASSWORD,
        is_private: bool = False,
    ) -> User:
        user = crud_user.create(
            db_session,
            obj_in=UserCreate(
                username=username,
                email=email or f"{username}@mail.com",
                password=password,
            ),
        )
        if is_private:
            user = crud_user.update_privacy(db_session, db_obj=user, is_private=True)
        return user

    return _make_user


@pytest.fixture
def user(make_user) -> User:
    return make_user("alice")


# =============================================================================
# HTTP Client
# =============================================================================


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client whose requests all share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
