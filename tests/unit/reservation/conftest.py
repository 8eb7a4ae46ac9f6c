import pytest

from flight_booking.reservation.domain import (
    Reservation,
    ReservationId,
    ReservationStatus,
)
from flight_booking.shared.domain import IsoDateTime


@pytest.fixture
def create_reservation(create_flight):
    """Reservation factory fixture; builds a flight unless one is given"""

    def _factory(
        reservation_id: str = "RES-TEST-1",
        flight=None,
        booked_at: str = "2025-06-15T09:30:00+00:00",
        status: ReservationStatus = ReservationStatus.PENDING,
    ) -> Reservation:
        return Reservation(
            id=ReservationId(value=reservation_id),
            flight=flight or create_flight(),
            booked_at=IsoDateTime.from_string(booked_at),
            status=status,
        )

    return _factory
