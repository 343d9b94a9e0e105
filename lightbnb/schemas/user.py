"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, Field, field_validator
from email_validator import validate_email, EmailNotValidError


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="User email address, matched exactly on lookup",
        examples=["devin@example.com"]
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        """
        Validate email syntax without a DNS lookup.
        The address is stored as given since lookups match exactly.
        """
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email format: {str(e)}")
        return v


class UserCreate(UserBase):
    """Schema for registering a new user. The password is hashed before storage."""

    password: str = Field(
        ...,
        min_length=1,
        max_length=72,
        description="Plain text password",
        examples=["password"]
    )


class UserResponse(BaseModel):
    """Schema for user responses (never includes the password hash)."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}
