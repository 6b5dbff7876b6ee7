"""
SQLAlchemy repository implementing the storage contract.
"""

import logging
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from entitykit.exceptions import StoreError
from .interfaces import IRepository

T = TypeVar('T')
ID = TypeVar('ID')

logger = logging.getLogger(__name__)


class BaseRepository(IRepository[T, ID], Generic[T, ID]):
    """
    Generic repository over one SQLAlchemy entity class.

    Writes are flushed into the session's current transaction; the
    ``transaction()`` scope decides whether they are committed.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy entity class with an ``id`` primary key
        """
        self.db = db
        self.model = model

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit on success, roll back on any error.

        Yields:
            The underlying session
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise StoreError("commit", f"Integrity violation: {e.orig}", constraint_violation=True) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("commit", str(e)) from e
        except Exception:
            self.db.rollback()
            raise

    def find_all(self) -> List[T]:
        """
        Retrieve all records.

        Returns:
            List of entity instances
        """
        try:
            return self.db.query(self.model).all()
        except SQLAlchemyError as e:
            raise StoreError("find_all", str(e)) from e

    def find_by_id(self, id: ID) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        try:
            return self.db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise StoreError("find_by_id", str(e)) from e

    def exists_by_id(self, id: ID) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        try:
            return self.db.query(self.model).filter(self.model.id == id).count() > 0
        except SQLAlchemyError as e:
            raise StoreError("exists_by_id", str(e)) from e

    def save(self, entity: T) -> T:
        """
        Insert a new record or flush changes to a loaded one.

        Args:
            entity: Entity instance to persist

        Returns:
            Persisted entity with its id populated
        """
        try:
            self.db.add(entity)
            self.db.flush()
            return entity
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity violation saving {self.model.__name__}: {e.orig}")
            raise StoreError("save", f"Integrity violation: {e.orig}", constraint_violation=True) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("save", str(e)) from e

    def save_all_atomically(self, entities: Sequence[T]) -> List[T]:
        """
        Persist a batch in one flush.

        Any failure rolls back the whole session, so no element of the
        batch (nor earlier writes in the same transaction) survives.

        Args:
            entities: Entity instances to persist

        Returns:
            Persisted entities in input order
        """
        try:
            self.db.add_all(entities)
            self.db.flush()
            return list(entities)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity violation saving {self.model.__name__} batch: {e.orig}")
            raise StoreError("save_all_atomically", f"Integrity violation: {e.orig}", constraint_violation=True) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("save_all_atomically", str(e)) from e

    def delete_by_id(self, id: ID) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.find_by_id(id)
        if obj is None:
            return False
        try:
            self.db.delete(obj)
            self.db.flush()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("delete_by_id", str(e)) from e

    def delete_all(self) -> None:
        """Delete every record of this entity type."""
        try:
            for obj in self.db.query(self.model).all():
                self.db.delete(obj)
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("delete_all", str(e)) from e

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        try:
            return self.db.query(self.model).count()
        except SQLAlchemyError as e:
            raise StoreError("count", str(e)) from e
