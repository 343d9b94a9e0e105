"""
Custom exception classes for the LightBnB data access layer.
Every failure carries a stable error code so callers can tell failure apart from not-found.
"""

from typing import Any, Dict, List, Optional


class DataAccessError(Exception):
    """Base data access exception class."""

    default_error_code = "DATA_ACCESS_ERROR"

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or self.default_error_code

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.error_code, "message": self.detail}


class StoreUnavailableError(DataAccessError):
    """The store could not be reached or the pool timed out."""

    default_error_code = "STORE_UNAVAILABLE"

    def __init__(self, detail: str = "Data store temporarily unavailable"):
        super().__init__(detail)


class QueryFailedError(DataAccessError):
    """The store rejected or failed to execute a statement."""

    default_error_code = "QUERY_FAILED"


class ConstraintViolationError(DataAccessError):
    """A write violated a store constraint."""

    default_error_code = "CONSTRAINT_VIOLATION"


class DuplicateResourceError(ConstraintViolationError):
    """Duplicate resource exception."""

    default_error_code = "DUPLICATE_RESOURCE"

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")
        self.resource = resource
        self.identifier = identifier


class InvalidRequestError(DataAccessError):
    """Request arguments failed validation before reaching the store."""

    default_error_code = "INVALID_REQUEST"

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None
    ):
        super().__init__(detail)
        self.field_errors = field_errors or []

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.field_errors:
            result["details"] = self.field_errors
        return result


class InvalidCredentialsError(DataAccessError):
    """Invalid login credentials exception."""

    default_error_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)
