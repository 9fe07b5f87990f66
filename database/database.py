"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and a simple `init_db` helper that
creates tables and seeds the workout video catalogue when it is empty.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from .models import Base, WorkoutVideo
from data.workout_videos import VIDEOS_DATA
from core.logger import get_logger

logger = get_logger("database")

# Read/Write partitioning pattern
# Set WRITE_DATABASE_URL and READ_DATABASE_URL to different instances to route
# reads to a replica; by default both point at the same SQLite file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///fitness.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_workout_videos(session: Session) -> int:
    """Insert the default workout videos if the catalogue is empty.

    Returns:
        Number of videos inserted (0 when the table already had rows).
    """
    if session.query(WorkoutVideo).count() > 0:
        return 0
    for item in VIDEOS_DATA:
        session.add(WorkoutVideo(**item))
    session.commit()
    logger.info("Seeded %s workout videos", len(VIDEOS_DATA))
    return len(VIDEOS_DATA)


def init_db():
    """Create all tables and seed the workout video catalogue."""
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        seed_workout_videos(session)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope."""
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
