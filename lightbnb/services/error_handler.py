"""
Error handling for store failures.
Classifies SQLAlchemy and driver exceptions into the typed data access errors callers can act on.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Dict, Optional
from sqlalchemy.exc import (
    SQLAlchemyError,
    IntegrityError,
    OperationalError,
    InterfaceError,
    DisconnectionError,
    TimeoutError as PoolTimeoutError,
)
from pydantic import ValidationError as PydanticValidationError
from lightbnb.utils.exceptions import (
    DataAccessError,
    StoreUnavailableError,
    QueryFailedError,
    ConstraintViolationError,
    InvalidRequestError,
)
import logging

logger = logging.getLogger(__name__)

CONNECTIVITY_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError, OSError)


class ErrorHandlerService:
    """
    Maps low-level exceptions to DataAccessError subclasses with consistent logging.
    """

    @staticmethod
    def translate_store_error(exception: Exception, action: str) -> DataAccessError:
        """
        Classify a store exception.

        Args:
            exception: Exception raised by SQLAlchemy or the driver
            action: Short description of the failed operation, used in messages

        Returns:
            Typed data access error to raise in its place
        """
        if isinstance(exception, DataAccessError):
            return exception

        if isinstance(exception, IntegrityError):
            logger.warning(f"Constraint violation while trying to {action}: {exception.orig}")
            return ConstraintViolationError(f"Failed to {action}: constraint violation")

        if isinstance(exception, CONNECTIVITY_ERRORS):
            logger.error(f"Store unavailable while trying to {action}: {exception}")
            return StoreUnavailableError(f"Failed to {action}: data store unavailable")

        if isinstance(exception, SQLAlchemyError):
            logger.error(f"Query failed while trying to {action}: {exception}")
            return QueryFailedError(f"Failed to {action}: query failed")

        logger.error(f"Unexpected error while trying to {action}: {exception}")
        return DataAccessError(f"Failed to {action}: {exception}")

    @staticmethod
    def format_validation_errors(exception: PydanticValidationError) -> List[Dict[str, str]]:
        """Flatten pydantic errors to field/message pairs."""
        details = []
        for error in exception.errors():
            field = ".".join(str(loc) for loc in error["loc"]) or "__root__"
            details.append({"field": field, "message": error["msg"], "type": error["type"]})
        return details

    @classmethod
    def translate_validation_error(cls, exception: PydanticValidationError, what: str) -> InvalidRequestError:
        field_errors = cls.format_validation_errors(exception)
        logger.warning(f"Invalid {what}: {field_errors}")
        return InvalidRequestError(f"Invalid {what}", field_errors=field_errors)


def validate_limit(limit: int) -> int:
    """Row limits must be positive integers."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidRequestError(
            "limit must be a positive integer",
            field_errors=[{"field": "limit", "message": f"Invalid limit: {limit!r}", "type": "value_error"}]
        )
    return limit


@asynccontextmanager
async def store_errors(
    action: str,
    translate: Optional[Dict[type, Callable[[], DataAccessError]]] = None
) -> AsyncIterator[None]:
    """
    Re-raise any exception from the block as a typed DataAccessError.

    Args:
        action: Description of the operation for log and error messages
        translate: Optional overrides mapping a classified error type to a factory
    """
    try:
        yield
    except DataAccessError:
        raise
    except Exception as e:
        error = ErrorHandlerService.translate_store_error(e, action)
        if translate:
            for source, factory in translate.items():
                if isinstance(error, source):
                    error = factory()
                    break
        raise error from e
