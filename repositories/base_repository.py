"""
Base repository with common CRUD operations.

Provides a foundation for all domain-specific repositories.
Database errors are rolled back and re-raised as PersistenceError; integrity
violations are re-raised unchanged so callers can map them to domain errors.
"""

from typing import TypeVar, Generic, Optional, List, Type, Any
from sqlmodel import Session, select, SQLModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from utils.exceptions import PersistenceError

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Generic base repository with common CRUD operations.

    Type Parameters:
        T: SQLModel entity type
    """

    def __init__(self, db_session: Session, model_class: Type[T]):
        """
        Initialize repository.

        Args:
            db_session: SQLModel database session
            model_class: The SQLModel class this repository manages
        """
        self.db = db_session
        self.model_class = model_class

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by ID.

        Args:
            id: Primary key

        Returns:
            Entity if found, None otherwise
        """
        return self.db.get(self.model_class, id)

    def get_all(self, limit: int = 100, offset: int = 0) -> List[T]:
        statement = select(self.model_class).offset(offset).limit(limit)
        return list(self.db.exec(statement).all())

    def commit(self) -> None:
        """
        Commit the current unit of work.

        Raises:
            IntegrityError: On constraint violations (after rollback)
            PersistenceError: On any other database failure (after rollback)
        """
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to save {self.model_class.__name__}: {e}") from e

    def create(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with ID
        """
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: T) -> T:
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: T) -> bool:
        self.db.delete(entity)
        self.commit()
        return True

    def exists(self, id: Any) -> bool:
        return self.get_by_id(id) is not None
