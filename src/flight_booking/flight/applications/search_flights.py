from datetime import date, datetime
from decimal import Decimal

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId, Route
from flight_booking.shared.domain.exception import InvalidArgumentException
from flight_booking.shared.utils.logger import get_logger
from flight_booking.shared.utils.validators import (
    require_present,
    require_text,
    to_decimal,
)

logger = get_logger("flight-service")


class FlightSearchService:
    """Flight registration and search use cases"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def add_flight(self, flight: Flight) -> None:
        require_present(flight, "flight")
        if self._repository.find_by_id(flight.id) is not None:
            raise InvalidArgumentException("Flight already exists", field="flight")
        self._repository.save(flight)
        logger.info(
            "Flight added",
            extra={"flight_id": str(flight.id), "route": str(flight.route)},
        )

    def search(
        self, source: str, destination: str, travel_date: date | datetime
    ) -> list[Flight]:
        """Flights on the route departing that day with at least one free seat

        Cities compare without regard to case.
        """
        require_text(source, "source")
        require_text(destination, "destination")
        require_present(travel_date, "travel_date")
        # Route rejects same-city pairs
        Route(source=source, destination=destination)

        day = travel_date.date() if isinstance(travel_date, datetime) else travel_date
        return [
            flight
            for flight in self._repository.find_all()
            if flight.route.matches(source, destination)
            and flight.departs_on(day)
            and not flight.is_full()
        ]

    def search_by_airline(
        self,
        source: str,
        destination: str,
        travel_date: date | datetime,
        airline: str,
    ) -> list[Flight]:
        return [
            flight
            for flight in self.search(source, destination, travel_date)
            if flight.airline.lower() == airline.lower()
        ]

    def search_by_price_range(
        self,
        source: str,
        destination: str,
        travel_date: date | datetime,
        min_price: Decimal | int | float,
        max_price: Decimal | int | float,
    ) -> list[Flight]:
        """Inclusive price range filter"""
        low = to_decimal(min_price)
        high = to_decimal(max_price)
        if not (low.is_finite() and high.is_finite()):
            raise InvalidArgumentException(
                "Price must be a finite number", field="price"
            )
        if low < 0 or high < 0:
            raise InvalidArgumentException("Price cannot be negative", field="price")
        if low > high:
            raise InvalidArgumentException(
                "Min price cannot be greater than max price", field="price"
            )
        return [
            flight
            for flight in self.search(source, destination, travel_date)
            if low <= flight.price_per_seat <= high
        ]

    def search_by_seats_available(
        self,
        source: str,
        destination: str,
        travel_date: date | datetime,
        required_seats: int,
    ) -> list[Flight]:
        if required_seats <= 0:
            raise InvalidArgumentException(
                "Required seats must be positive", field="required_seats"
            )
        return [
            flight
            for flight in self.search(source, destination, travel_date)
            if flight.available_seats >= required_seats
        ]

    def find_flight(self, flight_id: str) -> Flight | None:
        require_text(flight_id, "flight_id")
        return self._repository.find_by_id(FlightId(flight_id.strip()))

    def total_flights(self) -> int:
        return len(self._repository.find_all())
