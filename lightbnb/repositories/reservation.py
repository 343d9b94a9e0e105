"""
Reservation repository for listing a guest's bookings.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, Select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Read-only access to reservations joined with their properties."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    @staticmethod
    def build_guest_reservations_query(guest_id: int, limit: int) -> Select:
        """
        Build the reservation listing statement for one guest.
        Rows are grouped per reservation so the property's ratings can be averaged.
        """
        return (
            select(
                Reservation.id,
                Property.title,
                Property.cost_per_night,
                Reservation.start_date,
                Reservation.end_date,
                func.avg(PropertyReview.rating).label("average_rating"),
                Property.cover_photo_url,
                Property.thumbnail_photo_url,
                Property.parking_spaces,
                Property.number_of_bathrooms,
                Property.number_of_bedrooms,
            )
            .select_from(Reservation)
            .join(Property, Reservation.property_id == Property.id)
            .join(PropertyReview, Property.id == PropertyReview.property_id)
            .where(Reservation.guest_id == guest_id)
            .group_by(Reservation.id, Property.id)
            .order_by(Reservation.start_date, Reservation.id)
            .limit(limit)
        )

    async def get_guest_reservations(self, guest_id: int, limit: int) -> List[Dict[str, Any]]:
        """
        Get a guest's reservations ordered by start date.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            List of row mappings
        """
        try:
            query = self.build_guest_reservations_query(guest_id, limit)
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings().all()]

            logger.debug(f"Retrieved {len(rows)} reservations for guest {guest_id}")
            return rows
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
