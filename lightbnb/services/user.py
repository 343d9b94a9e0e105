"""
User service for registration, lookup and login.
"""

from typing import Optional, Union, Dict, Any
from pydantic import ValidationError as PydanticValidationError
from lightbnb.database import Database
from lightbnb.models.user import User
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.services.error_handler import ErrorHandlerService, store_errors
from lightbnb.utils.exceptions import (
    ConstraintViolationError,
    DuplicateResourceError,
    InvalidCredentialsError,
)
import logging

logger = logging.getLogger(__name__)


class UserService:
    """
    User operations over an injected store handle.
    Lookups return None when nothing matches; store failures raise DataAccessError.
    """

    def __init__(self, database: Database):
        self.database = database

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Get a single user given their email.

        Args:
            email: Email address, matched exactly

        Returns:
            The user, or None if no user has this email

        Raises:
            DataAccessError: If the store fails
        """
        async with store_errors(f"get user with email {email}"):
            async with self.database.acquire() as session:
                return await UserRepository(session).get_by_email(email)

    async def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Get a single user given their id.

        Raises:
            DataAccessError: If the store fails
        """
        async with store_errors(f"get user with id {user_id}"):
            async with self.database.acquire() as session:
                return await UserRepository(session).get_by_id(user_id)

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> User:
        """
        Add a new user to the database.

        Args:
            user: Name, email and plain text password

        Returns:
            The persisted user including its generated id

        Raises:
            InvalidRequestError: If the user data is invalid
            DuplicateResourceError: If the email is already registered
            DataAccessError: If the store fails
        """
        if not isinstance(user, UserCreate):
            try:
                user = UserCreate.model_validate(user)
            except PydanticValidationError as e:
                raise ErrorHandlerService.translate_validation_error(e, "user") from e

        duplicate = {ConstraintViolationError: lambda: DuplicateResourceError("User", user.email)}
        async with store_errors(f"add user {user.email}", translate=duplicate):
            async with self.database.acquire() as session:
                return await UserRepository(session).create_user(user.model_dump())

    async def authenticate_user(self, email: str, password: str) -> User:
        """
        Check a login against the stored password hash.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
            DataAccessError: If the store fails
        """
        async with store_errors(f"authenticate user {email}"):
            async with self.database.acquire() as session:
                user = await UserRepository(session).authenticate_user(email, password)

        if user is None:
            logger.warning(f"Rejected login for {email}")
            raise InvalidCredentialsError()
        return user
