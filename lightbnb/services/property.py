"""
Property service for listing search and creation.
Accepts either validated schemas or plain mappings from the calling layer.
"""

from typing import Optional, List, Dict, Any, Union
from pydantic import ValidationError as PydanticValidationError
from lightbnb.database import Database
from lightbnb.models.property import Property
from lightbnb.repositories.property import PropertyRepository
from lightbnb.schemas.property import PropertyCreate, PropertySearchFilters, PropertyView
from lightbnb.services.error_handler import ErrorHandlerService, store_errors, validate_limit
import logging

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Property operations over an injected store handle.
    """

    def __init__(self, database: Database):
        self.database = database

    async def get_all_properties(
        self,
        options: Union[PropertySearchFilters, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyView]:
        """
        Get properties matching every given filter, cheapest first.

        Args:
            options: Search filters; unknown keys are ignored
            limit: Maximum number of results, defaults to the configured row limit

        Returns:
            Property views with their average rating

        Raises:
            InvalidRequestError: If a filter or the limit is invalid
            DataAccessError: If the store fails
        """
        if limit is None:
            limit = self.database.settings.default_result_limit
        validate_limit(limit)

        if not isinstance(options, PropertySearchFilters):
            try:
                options = PropertySearchFilters.model_validate(options or {})
            except PydanticValidationError as e:
                raise ErrorHandlerService.translate_validation_error(e, "property search filters") from e

        async with store_errors("search properties"):
            async with self.database.acquire() as session:
                rows = await PropertyRepository(session).search_properties(options, limit)

        return [PropertyView.model_validate(row) for row in rows]

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Property:
        """
        Add a property to the database.

        Args:
            property_data: All property details, cost_per_night in minor units

        Returns:
            The persisted property including its generated id

        Raises:
            InvalidRequestError: If the property data is invalid
            ConstraintViolationError: If the owner does not exist
            DataAccessError: If the store fails
        """
        if not isinstance(property_data, PropertyCreate):
            try:
                property_data = PropertyCreate.model_validate(property_data)
            except PydanticValidationError as e:
                raise ErrorHandlerService.translate_validation_error(e, "property") from e

        async with store_errors(f"add property '{property_data.title}'"):
            async with self.database.acquire() as session:
                return await PropertyRepository(session).create_property(property_data.model_dump())
