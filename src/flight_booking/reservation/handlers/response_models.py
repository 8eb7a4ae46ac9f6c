from __future__ import annotations

from pydantic import BaseModel

from flight_booking.reservation.domain.entity import Reservation, Traveler


class TravelerData(BaseModel):
    """Traveler response model"""

    traveler_id: str
    full_name: str
    email: str | None
    category: str


class ReservationData(BaseModel):
    """Reservation response model"""

    reservation_id: str
    flight_id: str
    status: str
    travelers: list[TravelerData]
    total_price: str
    payment_ref: str | None
    booked_at: str


class SuccessResponse(BaseModel):
    status: str = "success"
    data: ReservationData


def _to_traveler_data(traveler: Traveler) -> TravelerData:
    return TravelerData(
        traveler_id=str(traveler.id),
        full_name=traveler.full_name,
        email=traveler.email,
        category=traveler.category.value,
    )


def to_response(reservation: Reservation) -> dict:
    """Render a Reservation as a response dict"""
    return SuccessResponse(
        data=ReservationData(
            reservation_id=str(reservation.id),
            flight_id=str(reservation.flight.id),
            status=reservation.status.value,
            travelers=[_to_traveler_data(t) for t in reservation.travelers],
            total_price=str(reservation.total_price),
            payment_ref=reservation.payment_ref,
            booked_at=str(reservation.booked_at),
        )
    ).model_dump()
