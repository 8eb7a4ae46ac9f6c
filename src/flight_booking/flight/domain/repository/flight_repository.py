from abc import abstractmethod

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """Flight repository port"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """Look up a flight, ignoring case"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        raise NotImplementedError
