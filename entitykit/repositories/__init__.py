"""
Repository layer for data access abstraction.

This package contains the storage contract consumed by services and a
SQLAlchemy implementation of it.
"""

from .interfaces import IRepository
from .base_repository import BaseRepository

__all__ = [
    "IRepository",
    "BaseRepository",
]
