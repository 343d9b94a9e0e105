"""
Test configuration and fixtures for the LightBnB data access layer.
Provides an in-memory store, service fixtures and test data factories.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, List

from lightbnb.config import Settings
from lightbnb.database import Database
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.services.user import UserService
from lightbnb.services.property import PropertyService
from lightbnb.services.reservation import ReservationService


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(database_url=TEST_DATABASE_URL, environment="testing", _env_file=None)


@pytest.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Create an initialized store handle with the schema in place."""
    db = Database(settings)
    await db.init()
    await db.create_tables()
    yield db
    await db.shutdown()


# Service fixtures
@pytest.fixture
def user_service(database: Database) -> UserService:
    return UserService(database)


@pytest.fixture
def property_service(database: Database) -> PropertyService:
    return PropertyService(database)


@pytest.fixture
def reservation_service(database: Database) -> ReservationService:
    return ReservationService(database)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: str = None,
        password: str = "password"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(user_service: UserService, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_service.add_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 7500,
        city: str = "Vancouver",
        **overrides
    ) -> dict:
        """Create property data dictionary."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "description",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
            "country": "Canada",
            "street": "123 Main Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(property_service: PropertyService, owner_id: int, **kwargs) -> Property:
        """Create a test property in the database."""
        return await property_service.add_property(PropertyFactory.create_property_data(owner_id, **kwargs))


async def add_reviews(database: Database, property_id: int, ratings: List[int]) -> None:
    """Insert reviews directly; reviews have no public write operation."""
    async with database.acquire() as session:
        session.add_all([PropertyReview(property_id=property_id, rating=rating) for rating in ratings])
        await session.commit()


async def add_reservation(
    database: Database,
    guest_id: int,
    property_id: int,
    start_date: date,
    end_date: date
) -> Reservation:
    """Insert a reservation directly; reservations are read-only in the services."""
    async with database.acquire() as session:
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date,
        )
        session.add(reservation)
        await session.commit()
        await session.refresh(reservation)
        return reservation


# Common test fixtures
@pytest.fixture
async def test_owner(user_service: UserService) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(user_service, name="Owner", email="owner@example.com")


@pytest.fixture
async def test_guest(user_service: UserService) -> User:
    """Create a guest."""
    return await UserFactory.create_user(user_service, name="Guest", email="guest@example.com")


@pytest.fixture
async def listed_properties(
    database: Database,
    property_service: PropertyService,
    test_owner: User,
    test_guest: User
) -> List[Property]:
    """
    Seed properties across cities and prices, each with reviews unless noted.

    Average ratings: Downtown Loft 4.5, Harbour View 3.0, Budget Room 2.0,
    Lake Cabin 5.0, Prairie House 4.0, Unreviewed Flat has none.
    """
    specs = [
        ("Harbour View", 12000, "Vancouver", test_owner.id, [3, 3]),
        ("Downtown Loft", 8000, "North Vancouver", test_owner.id, [4, 5]),
        ("Budget Room", 4000, "Vancouver", test_guest.id, [2]),
        ("Lake Cabin", 5000, "Kelowna", test_guest.id, [5, 5, 5]),
        ("Prairie House", 10000, "Calgary", test_owner.id, [4]),
        ("Unreviewed Flat", 6000, "Vancouver", test_owner.id, []),
    ]

    created = []
    for title, cost, city, owner_id, ratings in specs:
        prop = await PropertyFactory.create_property(
            property_service, owner_id, title=title, cost_per_night=cost, city=city
        )
        if ratings:
            await add_reviews(database, prop.id, ratings)
        created.append(prop)
    return created


def assert_non_decreasing(values: list) -> None:
    """Assert that a sequence is sorted ascending."""
    assert all(a <= b for a, b in zip(values, values[1:])), values
