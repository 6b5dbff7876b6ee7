"""
Service Interfaces

Abstract base classes for the service layer, so controllers depend on the
contract rather than a concrete service.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Sequence, TypeVar

ID = TypeVar('ID')
M = TypeVar('M')


class ICrudService(ABC, Generic[ID, M]):
    """
    Abstract interface for the lifecycle operations of one resource.

    Every operation is a self-contained transaction and raises an
    ApplicationError subclass on failure.
    """

    @abstractmethod
    def find_all(self) -> List[M]:
        """
        Return every stored record as a model.

        Returns:
            Models in store iteration order (empty when the store is empty)
        """
        pass

    @abstractmethod
    def find_by_id(self, id: ID) -> M:
        """
        Return one record.

        Raises:
            EntityNotFoundError: If no record has that id
        """
        pass

    @abstractmethod
    def create(self, model: M) -> M:
        """
        Insert a new record.

        Returns:
            The stored model, including any store-assigned id

        Raises:
            EntityIdAlreadyExistsError: If the model's explicit id is taken
            EntityValidationError: If a resource rule rejects the model
        """
        pass

    @abstractmethod
    def update(self, model: M) -> M:
        """
        Apply a model onto its existing record.

        Raises:
            EntityIdRequiredError: If the model has no id
            EntityNotFoundError: If no record has that id
            EntityValidationError: If a resource rule rejects the model
        """
        pass

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        """
        Delete one record.

        Raises:
            EntityNotFoundError: If no record has that id
        """
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every record."""
        pass

    @abstractmethod
    def add_all(self, models: Sequence[M]) -> List[M]:
        """
        Insert a batch of records, all or nothing.

        No pre-existence check is made for explicit ids; the store decides.
        """
        pass

    @abstractmethod
    def update_all(self, models: Sequence[M]) -> List[M]:
        """
        Update a batch of existing records, all or nothing.

        Raises:
            EntityIdRequiredError: If any model has no id
            EntityNotFoundError: If any target record is missing
        """
        pass
