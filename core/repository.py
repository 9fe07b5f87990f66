"""Repository pattern base class for database operations.

Provides the small set of CRUD helpers the history and catalogue services
share, so they do not repeat session boilerplate.
"""

from sqlalchemy.orm import Query, Session
from typing import TypeVar, Generic, Type, Optional, Any
from database.models import Base

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        return save(self.session, obj)

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None if not found."""
        return self.session.get(self.model, id)

    def query(self) -> Query:
        return self.session.query(self.model)


def save(session: Session, obj: Base) -> Base:
    """Convenience function to add, commit and refresh an object.

    Args:
        session: Database session.
        obj: Model instance to persist.

    Returns:
        The persisted object with refreshed attributes.
    """
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
