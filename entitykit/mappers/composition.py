"""
Checks on how mappers compose.
"""

import logging
from typing import List, Union

from entitykit.exceptions import ConfigurationError
from .base_mapper import BaseMapper
from .partial_mapper import BasePartialMapper

logger = logging.getLogger(__name__)

AnyMapper = Union[BaseMapper, BasePartialMapper]


def ensure_acyclic(mapper: AnyMapper) -> None:
    """
    Verify that no mapper embeds itself, directly or transitively.

    The walk follows ``partial_mappers()`` and tracks mapper types along the
    current path, so the same partial type may appear on sibling fields.

    Args:
        mapper: Root mapper of a resource

    Raises:
        ConfigurationError: If a mapper type reappears on its own path
    """
    _walk(mapper, [])


def _walk(mapper: AnyMapper, path: List[type]) -> None:
    mapper_type = type(mapper)
    if mapper_type in path:
        cycle = " -> ".join(t.__name__ for t in path + [mapper_type])
        logger.error(f"Cyclic mapper composition: {cycle}")
        raise ConfigurationError(f"Cyclic mapper composition: {cycle}")

    path.append(mapper_type)
    for child in mapper.partial_mappers():
        _walk(child, path)
    path.pop()
