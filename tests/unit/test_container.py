from flight_booking.config import BookingSettings
from flight_booking.container import create_booking_system
from flight_booking.shared.domain import IdGenerator


class FixedIds(IdGenerator):
    def __init__(self, *ids: str) -> None:
        self._ids = list(ids)

    def next_id(self) -> str:
        return self._ids.pop(0)


class TestCreateBookingSystem:
    def test_ids_follow_settings(self, create_flight, fixed_clock):
        system = create_booking_system(
            settings=BookingSettings(
                reservation_id_prefix="BK", reservation_id_start=10
            ),
            clock=fixed_clock,
        )

        reservation = system.reservations.create_reservation(create_flight())

        assert str(reservation.id) == "BK11"

    def test_injected_id_generators(self, create_flight, fixed_clock):
        system = create_booking_system(
            settings=BookingSettings(),
            clock=fixed_clock,
            reservation_ids=FixedIds("R-A"),
            payment_ids=FixedIds("P-A"),
        )

        reservation = system.reservations.create_reservation(create_flight())
        payment = system.payments.charge(
            str(reservation.id), 100, "4532015112830366", "123", "12/27"
        )

        assert str(reservation.id) == "R-A"
        assert str(payment.id) == "P-A"

    def test_systems_do_not_share_counters(self, create_flight):
        first = create_booking_system(settings=BookingSettings())
        second = create_booking_system(settings=BookingSettings())

        first.reservations.create_reservation(create_flight())
        reservation = second.reservations.create_reservation(create_flight())

        assert str(reservation.id) == "RES1001"

    def test_reservations_share_the_inventory(self, create_flight, create_traveler):
        system = create_booking_system(settings=BookingSettings())
        flight = create_flight(total_seats=2)
        system.flights.add_flight(flight)

        reservation = system.reservations.create_reservation(flight)
        system.reservations.add_traveler(reservation, create_traveler())
        system.reservations.confirm(reservation, "PAY5001")

        assert system.inventory.is_full(flight) is False
        assert flight.available_seats == 1
