"""Pytest fixtures: an in-memory database and a TestClient wired to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import seed_workout_videos
from database.deps import get_db_read, get_db_write
from database.models import Base


@pytest.fixture()
def test_engine():
    """Create a fresh in-memory SQLite engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(test_engine):
    """Session on the test engine with the workout catalogue seeded."""
    session = sessionmaker(bind=test_engine)()
    seed_workout_videos(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    """TestClient whose read and write sessions both use the test session."""
    from main import app

    def _get_db():
        yield db

    app.dependency_overrides[get_db_read] = _get_db
    app.dependency_overrides[get_db_write] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
