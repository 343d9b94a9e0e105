"""
Service layer exposing the LightBnB data access operations.
"""

from .user import UserService
from .reservation import ReservationService
from .property import PropertyService

__all__ = [
    "UserService",
    "ReservationService",
    "PropertyService",
]
