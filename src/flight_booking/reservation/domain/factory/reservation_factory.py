from flight_booking.flight.domain import Flight
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain import IdGenerator, IsoDateTime
from flight_booking.shared.utils.clock import Clock, utc_now


class ReservationFactory:
    """Reservation factory

    - ids come from the injected generator
    - new reservations start PENDING with an empty roster
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self._id_generator = id_generator
        self._clock = clock

    def create(self, flight: Flight) -> Reservation:
        return Reservation(
            id=ReservationId(self._id_generator.next_id()),
            flight=flight,
            booked_at=IsoDateTime(self._clock()),
            status=ReservationStatus.PENDING,
        )
