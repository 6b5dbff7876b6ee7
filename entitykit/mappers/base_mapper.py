"""
Mapper contract for a resource type.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from .partial_mapper import BasePartialMapper

ID = TypeVar('ID')
M = TypeVar('M')  # domain model
E = TypeVar('E')  # storage entity
I = TypeVar('I')  # input DTO
O = TypeVar('O')  # output DTO


class BaseMapper(ABC, Generic[ID, M, E, I, O]):
    """
    Bidirectional conversion between the shapes of one resource.

    Shared fields must survive ``entity -> model -> entity`` and
    ``dto -> model -> dto`` unchanged. Embedded fields are delegated to
    the partial mappers returned by ``partial_mappers()``.
    """

    #: Human-readable resource name used in error messages and logs
    entity_name: str = "Entity"

    @abstractmethod
    def to_model(self, dto: I) -> M:
        """
        Convert an input DTO to a model.

        Args:
            dto: Incoming payload

        Returns:
            Model carrying the DTO's id (``None`` when absent)
        """
        ...

    @abstractmethod
    def to_output_dto(self, model: M) -> O:
        """Convert a model to an output DTO."""
        ...

    @abstractmethod
    def to_entity(self, model: M) -> E:
        """
        Convert a model to a fresh entity.

        Used only for records that are about to be inserted. A model without
        an id must yield an entity whose id is unset so the store assigns it.
        """
        ...

    @abstractmethod
    def entity_to_model(self, entity: E) -> M:
        """Convert a stored entity to a model."""
        ...

    @abstractmethod
    def apply_model_to(self, entity: E, model: M) -> E:
        """
        Update an existing entity in place from a model.

        The entity keeps its identifier and any field the model does not
        represent. Used exclusively on the update path.

        Returns:
            The same entity instance
        """
        ...

    @abstractmethod
    def extract_id(self, model: M) -> Optional[ID]:
        """
        Return the model's identifier.

        Returns:
            The id, or None when the model is not yet created
        """
        ...

    def entity_to_output_dto(self, entity: E) -> O:
        """Convert a stored entity straight to an output DTO."""
        return self.to_output_dto(self.entity_to_model(entity))

    def partial_mappers(self) -> Sequence[BasePartialMapper]:
        """Mappers of the sub-records embedded in this resource."""
        return ()
