"""
Partial mapper contract for embedded sub-records.
"""

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

PM = TypeVar('PM')  # partial model
PE = TypeVar('PE')  # partial entity
PI = TypeVar('PI')  # partial input DTO
PO = TypeVar('PO')  # partial output DTO


class BasePartialMapper(ABC, Generic[PM, PE, PI, PO]):
    """
    Converts a sub-object that lives inside a parent record.

    A parent mapper owns one partial mapper per embedded field and calls it
    explicitly for that field. Partial mappers may own partial mappers of
    their own.
    """

    @abstractmethod
    def to_model(self, dto: PI) -> PM:
        """Convert an input DTO to a partial model."""
        ...

    @abstractmethod
    def to_output_dto(self, model: PM) -> PO:
        """Convert a partial model to an output DTO."""
        ...

    @abstractmethod
    def to_entity(self, model: PM) -> PE:
        """Convert a partial model to a fresh partial entity."""
        ...

    @abstractmethod
    def entity_to_model(self, entity: PE) -> PM:
        """Convert a stored partial entity to a partial model."""
        ...

    @abstractmethod
    def apply_model_to(self, entity: PE, model: PM) -> PE:
        """
        Copy the model's fields onto an existing partial entity.

        Returns the updated entity; the parent reassigns it to its field.
        """
        ...

    def entity_to_output_dto(self, entity: PE) -> PO:
        """Convert a stored partial entity straight to an output DTO."""
        return self.to_output_dto(self.entity_to_model(entity))

    def partial_mappers(self) -> Sequence["BasePartialMapper"]:
        """Mappers of the sub-objects embedded in this one."""
        return ()
