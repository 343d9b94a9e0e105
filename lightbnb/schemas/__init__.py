"""
Pydantic schemas for request/response validation.
"""

# User schemas
from .user import (
    UserBase,
    UserCreate,
    UserResponse,
)

# Property schemas
from .property import (
    MINOR_UNITS_PER_MAJOR,
    PropertyBase,
    PropertyCreate,
    PropertyResponse,
    PropertySearchFilters,
    PropertyView,
    to_minor_units,
)

# Reservation schemas
from .reservation import ReservationView

__all__ = [
    "UserBase",
    "UserCreate",
    "UserResponse",
    "MINOR_UNITS_PER_MAJOR",
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertySearchFilters",
    "PropertyView",
    "to_minor_units",
    "ReservationView",
]
