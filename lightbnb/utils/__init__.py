"""
Utility modules for LightBnB.
"""

from .exceptions import (
    DataAccessError,
    StoreUnavailableError,
    QueryFailedError,
    ConstraintViolationError,
    DuplicateResourceError,
    InvalidRequestError,
    InvalidCredentialsError,
)

__all__ = [
    "DataAccessError",
    "StoreUnavailableError",
    "QueryFailedError",
    "ConstraintViolationError",
    "DuplicateResourceError",
    "InvalidRequestError",
    "InvalidCredentialsError",
]
