"""
Pydantic schemas for property creation, search filters and listing views.
Nightly prices are stored in minor currency units; search filters take major units.
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from typing import Optional, Tuple
from decimal import Decimal

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (dollars) to stored minor units (cents)."""
    return int((Decimal(amount) * MINOR_UNITS_PER_MAJOR).to_integral_value())


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    owner_id: int = Field(..., gt=0, description="ID of the owning user")

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Property listing title",
        examples=["Speed lamp"]
    )

    description: str = Field(
        "",
        max_length=5000,
        description="Detailed property description"
    )

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly price in minor currency units (cents)",
        examples=[93061]
    )

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., max_length=255, examples=["Canada"])
    street: str = Field(..., max_length=255, examples=["536 Namsub Highway"])
    city: str = Field(..., max_length=255, examples=["Sotboske"])
    province: str = Field(..., max_length=255, examples=["Quebec"])
    post_code: str = Field(..., max_length=255, examples=["28142"])

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        """Validate and clean title."""
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for creating a new property listing."""


class PropertyResponse(BaseModel):
    """
    Schema for a persisted property.
    Rows are read back as stored, so no input constraints apply.
    """

    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None
    country: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None

    model_config = {"from_attributes": True}


class PropertyView(PropertyResponse):
    """Property listing row with its derived average review rating."""

    average_rating: Optional[float] = None


class PropertySearchFilters(BaseModel):
    """
    Optional filters for property search, combined conjunctively.

    Prices are in major units and converted to minor units before binding.
    The misspelled ``minumum_rating`` key is accepted for older callers.
    """

    city: Optional[str] = Field(None, description="Substring of the city name")
    owner_id: Optional[int] = Field(None, gt=0, description="Only properties owned by this user")
    minimum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    maximum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    minimum_rating: Optional[float] = Field(
        None,
        ge=0,
        le=5,
        validation_alias=AliasChoices("minimum_rating", "minumum_rating"),
        description="Lowest accepted average rating"
    )

    model_config = {"extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def validate_price_range(self):
        """Reject an inverted price range."""
        if (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
            and self.minimum_price_per_night > self.maximum_price_per_night
        ):
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self

    @property
    def has_price_range(self) -> bool:
        return self.minimum_price_per_night is not None and self.maximum_price_per_night is not None

    def price_range_in_minor_units(self) -> Optional[Tuple[int, int]]:
        """Inclusive (low, high) range in stored minor units, or None unless both bounds are set."""
        if not self.has_price_range:
            return None
        return (
            to_minor_units(self.minimum_price_per_night),
            to_minor_units(self.maximum_price_per_night),
        )
