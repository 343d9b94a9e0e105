"""
Pydantic schemas for reservation listings.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import date


class ReservationView(BaseModel):
    """A guest's reservation joined with its property and average rating."""

    id: int
    title: str
    cost_per_night: int
    start_date: date
    end_date: date
    average_rating: Optional[float] = None
    cover_photo_url: str
    thumbnail_photo_url: str
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int

    model_config = {"from_attributes": True}
