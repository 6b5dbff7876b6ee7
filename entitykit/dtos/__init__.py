"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the transport layer from the
domain models and storage entities.

Structure:
- request/: base shapes for incoming payloads
- response/: base shapes for outgoing payloads and controller outcomes
"""
from .request import BaseInputDTO, BasePartialInputDTO
from .response import BaseOutputDTO, BasePartialOutputDTO, ControllerResponse

__all__ = [
    "BaseInputDTO",
    "BasePartialInputDTO",
    "BaseOutputDTO",
    "BasePartialOutputDTO",
    "ControllerResponse",
]
