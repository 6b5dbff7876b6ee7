"""
Base storage entity types.
"""

from dataclasses import fields
from typing import Any, Tuple

from entitykit.database import Base


class BaseEntity(Base):
    """
    Abstract base for stored records.

    Subclasses declare exactly one primary-key column named ``id``.
    Integer keys left as ``None`` are assigned by the store on insert.
    """

    __abstract__ = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)!r}>"


class BasePartialEntity:
    """
    Base for sub-records stored in the columns of their parent's table.

    Subclasses are dataclasses whose field order matches the column order
    passed to ``sqlalchemy.orm.composite``::

        @dataclass
        class Dimensions(BasePartialEntity):
            width: int
            height: int

        class Widget(BaseEntity):
            ...
            width = Column(Integer)
            height = Column(Integer)
            dimensions = composite(Dimensions, width, height)
    """

    def __composite_values__(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, field.name) for field in fields(self))
