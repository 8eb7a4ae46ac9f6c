from abc import abstractmethod

from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """Reservation repository port"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation_id: ReservationId) -> None:
        raise NotImplementedError
