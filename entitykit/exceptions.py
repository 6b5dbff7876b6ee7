"""
Custom exception classes for the entity lifecycle pipeline.

Every exception carries an ErrorKind so the controller can translate it
into a transport status without inspecting messages.
"""
from typing import Any

from entitykit.constants import ErrorKind


class ApplicationError(Exception):
    """Base exception for all application errors"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when a resource is wired incorrectly"""

    kind = ErrorKind.CONFIGURATION


class EntityNotFoundError(ApplicationError):
    """Raised when no entity exists for the given identifier"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_id: Any, entity_type: str):
        details = {"entity_id": entity_id, "entity_type": entity_type}
        super().__init__(f"Entity of type '{entity_type}' not found with id '{entity_id}'", details)


class EntityIdAlreadyExistsError(ApplicationError):
    """Raised when a client-supplied identifier is already taken"""

    kind = ErrorKind.ID_ALREADY_EXISTS

    def __init__(self, entity_id: Any, entity_type: str):
        details = {"entity_id": entity_id, "entity_type": entity_type}
        super().__init__(f"Entity of type '{entity_type}' already exists with id '{entity_id}'", details)


class EntityIdRequiredError(ApplicationError):
    """Raised when an operation needs an identifier the model does not carry"""

    kind = ErrorKind.ID_REQUIRED

    def __init__(self, operation: str):
        details = {"operation": operation}
        super().__init__(f"Entity ID is required for the operation '{operation}'", details)


class EntityIdMismatchError(ApplicationError):
    """Raised when the path identifier and the body identifier disagree"""

    kind = ErrorKind.ID_MISMATCH

    def __init__(self, path_id: Any, body_id: Any):
        details = {"path_id": path_id, "body_id": body_id}
        super().__init__(f"Path ID '{path_id}' does not match body ID '{body_id}'", details)


class EntityValidationError(ApplicationError):
    """Raised when a resource-specific business rule rejects input"""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(f"Entity validation failed: {message}", details)


class StoreError(ApplicationError):
    """Raised when the underlying store fails"""

    kind = ErrorKind.STORE_FAILURE

    def __init__(self, operation: str, message: str, constraint_violation: bool = False):
        details = {"operation": operation, "constraint_violation": constraint_violation}
        self.constraint_violation = constraint_violation
        super().__init__(message, details)
