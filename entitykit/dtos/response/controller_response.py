"""
Controller Response

Transport-neutral outcome of a controller call: a status code plus either a
payload or a diagnostic detail.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class ControllerResponse(Generic[T]):
    """
    Outcome of one controller operation.

    Error responses carry no payload. ``detail`` explains the failure to
    in-process callers and logs; it is never sent over the wire.
    """

    status_code: int
    body: Optional[T] = None
    detail: Optional[str] = None

    def to_content(self) -> Any:
        """JSON-ready content for the transport, or None for empty bodies."""
        if self.detail is not None:
            return None
        return self.body
