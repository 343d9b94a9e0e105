"""
Reservation model linking a guest to a property for a date range.
"""

from sqlalchemy import Date, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.property import Property


class Reservation(Base):
    """Booking of one property by one guest. Read-only in this package."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest: Mapped["User"] = relationship("User", back_populates="reservations", lazy="noload")
    property: Mapped["Property"] = relationship("Property", back_populates="reservations", lazy="noload")

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, guest_id={self.guest_id}, property_id={self.property_id})>"
