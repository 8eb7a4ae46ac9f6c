from dataclasses import dataclass

from flight_booking.config import BookingSettings
from flight_booking.flight.applications import FlightSearchService
from flight_booking.flight.domain import FlightInventory
from flight_booking.flight.infrastructure import InMemoryFlightRepository
from flight_booking.payment.applications import PaymentLedger
from flight_booking.payment.domain import PaymentFactory, Settlement
from flight_booking.payment.infrastructure import InMemoryPaymentRepository
from flight_booking.reservation.applications import ReservationCoordinator
from flight_booking.reservation.domain import ReservationFactory
from flight_booking.reservation.infrastructure import InMemoryReservationRepository
from flight_booking.shared.domain import IdGenerator, SequentialIdGenerator
from flight_booking.shared.utils.clock import Clock, utc_now


@dataclass
class BookingSystem:
    """Services sharing one set of in-memory repositories"""

    flights: FlightSearchService
    inventory: FlightInventory
    reservations: ReservationCoordinator
    payments: PaymentLedger


def create_booking_system(
    settings: BookingSettings | None = None,
    clock: Clock = utc_now,
    reservation_ids: IdGenerator | None = None,
    payment_ids: IdGenerator | None = None,
    settlement: Settlement | None = None,
) -> BookingSystem:
    """Wire the booking services

    Id generators default to sequential ones built from `settings`; each
    system gets its own counters.
    """
    settings = settings or BookingSettings.from_env()
    reservation_ids = reservation_ids or SequentialIdGenerator(
        settings.reservation_id_prefix, settings.reservation_id_start
    )
    payment_ids = payment_ids or SequentialIdGenerator(
        settings.payment_id_prefix, settings.payment_id_start
    )

    inventory = FlightInventory()
    return BookingSystem(
        flights=FlightSearchService(repository=InMemoryFlightRepository()),
        inventory=inventory,
        reservations=ReservationCoordinator(
            repository=InMemoryReservationRepository(),
            factory=ReservationFactory(reservation_ids, clock=clock),
            inventory=inventory,
        ),
        payments=PaymentLedger(
            repository=InMemoryPaymentRepository(),
            factory=PaymentFactory(payment_ids, clock=clock),
            settlement=settlement,
        ),
    )
