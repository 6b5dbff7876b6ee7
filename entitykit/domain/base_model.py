"""
Base domain model types.

A model always carries an ``id``; ``None`` stands for a record that has not
been created yet. Partial models describe sub-objects embedded in a parent
and carry no identifier.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

ID = TypeVar('ID')


@dataclass(kw_only=True)
class BaseDomainModel(Generic[ID]):
    """Base for every resource model."""

    id: Optional[ID] = None

    @property
    def is_new(self) -> bool:
        """True while the model has no identifier assigned."""
        return self.id is None


@dataclass(kw_only=True)
class BasePartialModel:
    """Base for models embedded in a parent model."""
