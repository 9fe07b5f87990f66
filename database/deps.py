"""Dependency helpers that expose read/write DB session generators.

Calculator endpoints take `get_db_write` because they may record history;
catalogue and history listings take `get_db_read`.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
