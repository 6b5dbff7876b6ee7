"""
Base Output DTOs
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ID = TypeVar('ID')


class BaseOutputDTO(BaseModel, Generic[ID]):
    """
    Base response DTO for a resource.

    The identifier is frozen; the remaining fields follow the concrete DTO.
    """

    id: ID = Field(description="Resource identifier", frozen=True)


class BasePartialOutputDTO(BaseModel):
    """Base response DTO for a sub-object embedded in a parent payload."""
