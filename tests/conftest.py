from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from flight_booking.flight.domain import Flight, FlightId, FlightInventory, Route
from flight_booking.reservation.domain import Traveler, TravelerId
from flight_booking.shared.domain import IsoDateTime, SequentialIdGenerator

# reference month for card expiry checks: 2025-06
FIXED_NOW = datetime(2025, 6, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW"""
    return lambda: FIXED_NOW


@pytest.fixture
def mock_repository():
    """Repository mock"""
    return MagicMock()


@pytest.fixture
def inventory():
    return FlightInventory()


@pytest.fixture
def reservation_ids():
    return SequentialIdGenerator("RES", 1000)


@pytest.fixture
def payment_ids():
    return SequentialIdGenerator("PAY", 5000)


@pytest.fixture
def create_flight():
    """Flight factory fixture (factories as fixtures)"""

    def _factory(
        flight_id: str = "AI101",
        source: str = "Delhi",
        destination: str = "Mumbai",
        departure_time: str = "2025-07-01T10:00:00",
        arrival_time: str = "2025-07-01T12:15:00",
        total_seats: int = 100,
        price_per_seat: Decimal = Decimal("5000"),
        airline: str = "Air India",
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            route=Route(source=source, destination=destination),
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            total_seats=total_seats,
            price_per_seat=price_per_seat,
            airline=airline,
        )

    return _factory


@pytest.fixture
def create_traveler():
    """Traveler factory fixture"""

    def _factory(
        traveler_id: str = "P001",
        first_name: str = "Asha",
        last_name: str = "Rao",
        email: str = "asha.rao@example.com",
        phone_number: str = "9876543210",
        age: int = 30,
    ) -> Traveler:
        return Traveler(
            id=TravelerId(value=traveler_id),
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            age=age,
        )

    return _factory
