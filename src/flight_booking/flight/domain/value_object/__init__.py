from .flight_id import FlightId
from .route import Route

__all__ = ["FlightId", "Route"]
