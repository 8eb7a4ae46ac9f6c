from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId


class InMemoryReservationRepository(ReservationRepository):
    """ReservationRepository kept in process memory"""

    def __init__(self) -> None:
        self._reservations: dict[ReservationId, Reservation] = {}

    def save(self, reservation: Reservation) -> None:
        self._reservations[reservation.id] = reservation

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        return self._reservations.get(reservation_id)

    def find_all(self) -> list[Reservation]:
        return list(self._reservations.values())

    def delete(self, reservation_id: ReservationId) -> None:
        self._reservations.pop(reservation_id, None)
