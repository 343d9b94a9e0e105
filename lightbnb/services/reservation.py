"""
Reservation service for listing a guest's bookings.
"""

from typing import List, Optional
from lightbnb.database import Database
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.reservation import ReservationView
from lightbnb.services.error_handler import store_errors, validate_limit
import logging

logger = logging.getLogger(__name__)


class ReservationService:
    """Reservation listing over an injected store handle."""

    def __init__(self, database: Database):
        self.database = database

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[ReservationView]:
        """
        Get all reservations for a single user, earliest start date first.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations, defaults to the configured row limit

        Returns:
            Reservation views; empty when the guest has none

        Raises:
            InvalidRequestError: If limit is not a positive integer
            DataAccessError: If the store fails
        """
        if limit is None:
            limit = self.database.settings.default_result_limit
        validate_limit(limit)

        async with store_errors(f"get reservations for guest {guest_id}"):
            async with self.database.acquire() as session:
                rows = await ReservationRepository(session).get_guest_reservations(guest_id, limit)

        return [ReservationView.model_validate(row) for row in rows]
