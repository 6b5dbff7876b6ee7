"""
Response DTOs

Base shapes for payloads returned to callers. The ``id`` of an output DTO
cannot be reassigned once built.
"""
from .base_output import BaseOutputDTO, BasePartialOutputDTO
from .controller_response import ControllerResponse

__all__ = ["BaseOutputDTO", "BasePartialOutputDTO", "ControllerResponse"]
