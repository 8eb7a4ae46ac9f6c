from datetime import date
from decimal import Decimal

from flight_booking.flight.domain.value_object import FlightId, Route
from flight_booking.shared.domain import Entity, IsoDateTime
from flight_booking.shared.domain.exception import (
    IllegalStateException,
    InvalidArgumentException,
)


class Flight(Entity[FlightId]):
    """Scheduled flight and its seat counters

    Invariant: 0 <= available_seats <= total_seats.
    """

    def __init__(
        self,
        id: FlightId,
        route: Route,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        total_seats: int,
        price_per_seat: Decimal,
        airline: str,
        available_seats: int | None = None,
    ) -> None:
        super().__init__(id)

        self._route = route
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._total_seats = total_seats
        self._available_seats = (
            total_seats if available_seats is None else available_seats
        )
        self._price_per_seat = price_per_seat
        self._airline = airline

        self._validate()

    def _validate(self) -> None:
        if self._total_seats <= 0:
            raise InvalidArgumentException(
                "Total seats must be positive", field="total_seats"
            )
        if not 0 <= self._available_seats <= self._total_seats:
            raise InvalidArgumentException(
                "Available seats must be between 0 and total seats",
                field="available_seats",
            )
        if self._price_per_seat < 0:
            raise InvalidArgumentException(
                "Price cannot be negative", field="price_per_seat"
            )
        if self._departure_time.is_aware() != self._arrival_time.is_aware():
            raise InvalidArgumentException(
                "Departure and arrival times must both carry a timezone or neither",
                field="arrival_time",
            )
        if not self._departure_time.is_before(self._arrival_time):
            raise InvalidArgumentException(
                "Departure time must be before arrival time", field="arrival_time"
            )

    @property
    def route(self) -> Route:
        return self._route

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def available_seats(self) -> int:
        return self._available_seats

    @property
    def price_per_seat(self) -> Decimal:
        return self._price_per_seat

    @property
    def airline(self) -> str:
        return self._airline

    def reserve_seats(self, count: int) -> bool:
        """Capture `count` seats

        Returns False without touching the counter when not enough seats are left.
        """
        if count <= 0:
            raise InvalidArgumentException(
                "Number of seats must be positive", field="count"
            )
        if count > self._available_seats:
            return False
        self._available_seats -= count
        return True

    def release_seats(self, count: int) -> None:
        """Give back `count` previously captured seats"""
        if count <= 0:
            raise InvalidArgumentException(
                "Number of seats must be positive", field="count"
            )
        if self._available_seats + count > self._total_seats:
            raise IllegalStateException(
                "Cannot release more seats than were reserved"
            )
        self._available_seats += count

    def is_full(self) -> bool:
        return self._available_seats == 0

    def departs_on(self, day: date) -> bool:
        return self._departure_time.date() == day

    def duration_minutes(self) -> int:
        return self._departure_time.minutes_until(self._arrival_time)
