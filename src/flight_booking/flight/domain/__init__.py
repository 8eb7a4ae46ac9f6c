from .entity import Flight
from .repository import FlightRepository
from .service import FlightInventory
from .value_object import FlightId, Route

__all__ = [
    "Flight",
    "FlightId",
    "Route",
    "FlightInventory",
    "FlightRepository",
]
