"""
Application-wide constants.

Centralizes status codes and error kinds shared by the service and
controller layers.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """
    Stable taxonomy of failures surfaced by the service layer.

    The controller maps each kind to exactly one transport status.
    """

    NOT_FOUND = 'NOT_FOUND'                    # No entity with the given ID
    ID_ALREADY_EXISTS = 'ID_ALREADY_EXISTS'    # Client-supplied ID collides
    ID_REQUIRED = 'ID_REQUIRED'                # Operation needs an ID the model lacks
    ID_MISMATCH = 'ID_MISMATCH'                # Path ID differs from body ID
    VALIDATION_FAILED = 'VALIDATION_FAILED'    # Resource-specific rule rejected input
    STORE_FAILURE = 'STORE_FAILURE'            # Underlying store failed
    CONFIGURATION = 'CONFIGURATION'            # Wiring problem (e.g. cyclic mappers)
    INTERNAL = 'INTERNAL'

    @classmethod
    def is_client_error(cls, kind: 'ErrorKind') -> bool:
        """Check if the failure was caused by caller input"""
        return kind in [
            cls.NOT_FOUND,
            cls.ID_ALREADY_EXISTS,
            cls.ID_REQUIRED,
            cls.ID_MISMATCH,
            cls.VALIDATION_FAILED,
        ]


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


# Route suffix for the batch endpoints
BATCH_PATH = "/batch"
