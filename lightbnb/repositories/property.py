"""
Property repository for listing creation and filtered search.
Every filter value is bound as a query parameter.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func, Select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchFilters
from typing import List, Dict, Any, Tuple
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings with filtered, rating-aware search.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a property with all of its fields in one statement.

        Args:
            property_data: Dictionary containing property information

        Returns:
            Created property instance
        """
        created_property = await self.create(property_data)
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> Tuple[List, List]:
        """
        Build SQLAlchemy conditions from search filters.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            Tuple of (WHERE conditions, HAVING conditions)
        """
        conditions = []
        having = []

        # City filter (partial match)
        if filters.city:
            conditions.append(Property.city.like(f"%{filters.city}%"))

        # Owner filter
        if filters.owner_id is not None:
            conditions.append(Property.owner_id == filters.owner_id)

        # Price range filter, stored in minor units
        price_range = filters.price_range_in_minor_units()
        if price_range is not None:
            low, high = price_range
            conditions.append(Property.cost_per_night >= low)
            conditions.append(Property.cost_per_night <= high)
        elif filters.minimum_price_per_night is not None or filters.maximum_price_per_night is not None:
            logger.warning("Ignoring price filter: minimum and maximum price per night must be given together")

        # Rating filter applies to the aggregate
        if filters.minimum_rating is not None:
            having.append(func.avg(PropertyReview.rating) >= filters.minimum_rating)

        return conditions, having

    def build_search_query(self, filters: PropertySearchFilters, limit: int) -> Select:
        """
        Build the property search statement without executing it.

        Args:
            filters: PropertySearchFilters instance with search criteria
            limit: Maximum number of records to return

        Returns:
            Select statement producing property columns plus average_rating
        """
        query = (
            select(
                *Property.__table__.columns,
                func.avg(PropertyReview.rating).label("average_rating"),
            )
            .select_from(Property)
            .join(PropertyReview, Property.id == PropertyReview.property_id)
        )

        conditions, having = self._build_filter_conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))

        query = query.group_by(Property.id)

        if having:
            query = query.having(and_(*having))

        return query.order_by(Property.cost_per_night, Property.id).limit(limit)

    async def search_properties(self, filters: PropertySearchFilters, limit: int) -> List[Dict[str, Any]]:
        """
        Search properties, cheapest first.

        Args:
            filters: PropertySearchFilters instance with search criteria
            limit: Maximum number of records to return

        Returns:
            List of row mappings with every property column and average_rating
        """
        try:
            query = self.build_search_query(filters, limit)
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings().all()]

            logger.debug(f"Property search returned {len(rows)} results")
            return rows
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise
