from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId


class InMemoryFlightRepository(FlightRepository):
    """FlightRepository kept in process memory, in insertion order"""

    def __init__(self) -> None:
        self._flights: dict[str, Flight] = {}

    def save(self, flight: Flight) -> None:
        self._flights[str(flight.id).lower()] = flight

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        return self._flights.get(str(flight_id).lower())

    def find_all(self) -> list[Flight]:
        return list(self._flights.values())
