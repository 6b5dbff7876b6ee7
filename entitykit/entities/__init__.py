"""
Storage entities.

Concrete resources declare their tables on ``entitykit.database.Base``
through ``BaseEntity`` and embed sub-records with ``BasePartialEntity``.
"""
from .base_entity import BaseEntity, BasePartialEntity

__all__ = ["BaseEntity", "BasePartialEntity"]
