from decimal import Decimal

from flight_booking.flight.domain import Flight, FlightInventory
from flight_booking.reservation.domain.entity.traveler import Traveler
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain import Entity, IsoDateTime
from flight_booking.shared.domain.exception import IllegalStateException
from flight_booking.shared.utils.validators import require_present, require_text


class Reservation(Entity[ReservationId]):
    """Reservation of seats on one flight for a roster of travelers

    - the roster can only change while PENDING
    - total_price always equals price_per_seat * number of travelers
    - confirming captures one seat per traveler, cancelling gives them back
    """

    def __init__(
        self,
        id: ReservationId,
        flight: Flight,
        booked_at: IsoDateTime,
        status: ReservationStatus = ReservationStatus.PENDING,
    ) -> None:
        super().__init__(id)

        self._flight = flight
        self._booked_at = booked_at
        self._status = status
        self._travelers: list[Traveler] = []
        self._total_price = Decimal("0")
        self._payment_ref: str | None = None

    @property
    def flight(self) -> Flight:
        return self._flight

    @property
    def booked_at(self) -> IsoDateTime:
        return self._booked_at

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def travelers(self) -> tuple[Traveler, ...]:
        return tuple(self._travelers)

    @property
    def traveler_count(self) -> int:
        return len(self._travelers)

    @property
    def total_price(self) -> Decimal:
        return self._total_price

    @property
    def payment_ref(self) -> str | None:
        return self._payment_ref

    def is_pending(self) -> bool:
        return self._status == ReservationStatus.PENDING

    def is_confirmed(self) -> bool:
        return self._status == ReservationStatus.CONFIRMED

    def is_cancelled(self) -> bool:
        return self._status == ReservationStatus.CANCELLED

    def is_withdrawn(self) -> bool:
        return self._status == ReservationStatus.WITHDRAWN

    def add_traveler(self, traveler: Traveler) -> None:
        require_present(traveler, "traveler")
        self._ensure_modifiable()
        self._travelers.append(traveler)
        self._recalculate_total_price()

    def remove_traveler(self, traveler: Traveler) -> None:
        """Drop a traveler from the roster; unknown travelers are ignored"""
        require_present(traveler, "traveler")
        self._ensure_modifiable()
        if traveler in self._travelers:
            self._travelers.remove(traveler)
        self._recalculate_total_price()

    def has_traveler_with_email(self, email: str) -> bool:
        return any(t.has_email(email) for t in self._travelers)

    def confirm(self, payment_ref: str, inventory: FlightInventory) -> bool:
        """Capture seats and move to CONFIRMED

        Returns False, leaving the reservation PENDING, when the flight does
        not have enough seats for the whole roster.
        """
        require_text(payment_ref, "payment_id")
        if not self._status.can_transition_to(ReservationStatus.CONFIRMED):
            raise IllegalStateException("Only pending reservations can be confirmed")
        if not self._travelers:
            raise IllegalStateException("Cannot confirm reservation without travelers")

        if not inventory.reserve_seats(self._flight, self.traveler_count):
            return False

        self._payment_ref = payment_ref
        self._status = ReservationStatus.CONFIRMED
        return True

    def cancel(self, inventory: FlightInventory) -> None:
        """Release the captured seats and move to CANCELLED"""
        if not self._status.can_transition_to(ReservationStatus.CANCELLED):
            raise IllegalStateException(
                "Only confirmed reservations can be cancelled"
            )
        # roster is frozen since confirmation, so this is the captured count
        inventory.release_seats(self._flight, self.traveler_count)
        self._status = ReservationStatus.CANCELLED

    def withdraw(self) -> None:
        """End a PENDING reservation without confirming it; no seats move"""
        if not self._status.can_transition_to(ReservationStatus.WITHDRAWN):
            raise IllegalStateException("Only pending reservations can be discarded")
        self._status = ReservationStatus.WITHDRAWN

    def _ensure_modifiable(self) -> None:
        if self._status != ReservationStatus.PENDING:
            raise IllegalStateException("Only pending reservations can be modified")

    def _recalculate_total_price(self) -> None:
        self._total_price = self._flight.price_per_seat * len(self._travelers)
