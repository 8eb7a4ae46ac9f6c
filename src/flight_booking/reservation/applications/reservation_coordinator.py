from flight_booking.flight.domain import Flight, FlightInventory
from flight_booking.reservation.domain.entity import Reservation, Traveler
from flight_booking.reservation.domain.factory import ReservationFactory
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain.exception import IllegalStateException
from flight_booking.shared.utils.logger import get_logger
from flight_booking.shared.utils.validators import require_present, require_text

logger = get_logger("reservation-service")


class ReservationCoordinator:
    """Reservation use cases

    Checks arguments, then hands the state change to the Reservation itself.
    Confirm and cancel touch one reservation and its flight; concurrent callers
    should lock the reservation first, then the flight.
    """

    def __init__(
        self,
        repository: ReservationRepository,
        factory: ReservationFactory,
        inventory: FlightInventory,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._inventory = inventory

    def create_reservation(self, flight: Flight) -> Reservation:
        """Open a PENDING reservation

        No seats are captured yet, but a full flight does not accept new ones.
        """
        require_present(flight, "flight")
        if self._inventory.is_full(flight):
            raise IllegalStateException("No available seats on this flight")

        reservation = self._factory.create(flight)
        self._repository.save(reservation)
        logger.info(
            "Reservation created",
            extra={"reservation_id": str(reservation.id), "flight_id": str(flight.id)},
        )
        return reservation

    def add_traveler(self, reservation: Reservation, traveler: Traveler) -> None:
        require_present(reservation, "reservation")
        require_present(traveler, "traveler")
        reservation.add_traveler(traveler)
        self._repository.save(reservation)

    def remove_traveler(self, reservation: Reservation, traveler: Traveler) -> None:
        require_present(reservation, "reservation")
        require_present(traveler, "traveler")
        reservation.remove_traveler(traveler)
        self._repository.save(reservation)

    def confirm(self, reservation: Reservation, payment_ref: str) -> bool:
        """Confirm against a payment reference

        Returns False when the flight cannot seat the whole roster.
        """
        require_present(reservation, "reservation")
        require_text(payment_ref, "payment_id")

        confirmed = reservation.confirm(payment_ref, self._inventory)
        if not confirmed:
            logger.info(
                "Not enough seats to confirm reservation",
                extra={
                    "reservation_id": str(reservation.id),
                    "travelers": reservation.traveler_count,
                    "available_seats": reservation.flight.available_seats,
                },
            )
            return False

        self._repository.save(reservation)
        logger.info(
            "Reservation confirmed",
            extra={"reservation_id": str(reservation.id), "payment_ref": payment_ref},
        )
        return True

    def cancel(self, reservation_id: str) -> bool:
        """Cancel a confirmed reservation; False when the id is unknown"""
        reservation = self.find_by_id(reservation_id)
        if reservation is None:
            return False

        reservation.cancel(self._inventory)
        self._repository.save(reservation)
        logger.info(
            "Reservation cancelled", extra={"reservation_id": str(reservation.id)}
        )
        return True

    def discard(self, reservation_id: str) -> bool:
        """Drop a PENDING reservation that will never be confirmed

        The reservation ends WITHDRAWN and leaves the repository. Nothing was
        captured, so no seats move.
        """
        reservation = self.find_by_id(reservation_id)
        if reservation is None:
            return False

        reservation.withdraw()
        self._repository.delete(reservation.id)
        logger.info(
            "Reservation discarded", extra={"reservation_id": str(reservation.id)}
        )
        return True

    def find_by_id(self, reservation_id: str) -> Reservation | None:
        require_text(reservation_id, "reservation_id")
        return self._repository.find_by_id(ReservationId(reservation_id))

    def find_by_traveler_email(self, email: str) -> list[Reservation]:
        require_text(email, "email")
        return [
            reservation
            for reservation in self._repository.find_all()
            if reservation.has_traveler_with_email(email)
        ]

    def total_reservations(self) -> int:
        return len(self._repository.find_all())

    def confirmed_count(self) -> int:
        """Reservations currently CONFIRMED; cancelled ones are not counted"""
        return sum(1 for r in self._repository.find_all() if r.is_confirmed())
