"""
Repository Interface

The minimal storage contract the service layer depends on. Any key-value or
relational store adapter that implements it can back a resource.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Generic, List, Optional, Sequence, TypeVar

E = TypeVar('E')
ID = TypeVar('ID')


class IRepository(ABC, Generic[E, ID]):
    """
    Abstract storage for one entity type.
    """

    @abstractmethod
    def find_all(self) -> List[E]:
        """Return every stored entity in store iteration order."""
        pass

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[E]:
        """Return the entity with the given id, or None."""
        pass

    @abstractmethod
    def exists_by_id(self, id: ID) -> bool:
        """Check whether an entity with the given id is stored."""
        pass

    @abstractmethod
    def save(self, entity: E) -> E:
        """
        Insert or update one entity.

        Returns:
            The stored entity, with any store-assigned id populated

        Raises:
            StoreError: If the store rejects the write
        """
        pass

    @abstractmethod
    def save_all_atomically(self, entities: Sequence[E]) -> List[E]:
        """
        Persist a batch as one unit of work.

        Either every entity is stored or none is.

        Raises:
            StoreError: If any element is rejected
        """
        pass

    @abstractmethod
    def delete_by_id(self, id: ID) -> bool:
        """
        Delete the entity with the given id.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every entity of this type."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored entities."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """
        Scope one logical transaction.

        Commits when the block exits normally and rolls back when it raises.
        """
        pass
