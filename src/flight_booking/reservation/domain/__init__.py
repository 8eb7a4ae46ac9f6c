from .entity import Reservation, Traveler
from .enum import ReservationStatus, TravelerCategory
from .factory import ReservationFactory
from .repository import ReservationRepository
from .value_object import ReservationId, TravelerId

__all__ = [
    "Reservation",
    "ReservationId",
    "ReservationStatus",
    "ReservationFactory",
    "ReservationRepository",
    "Traveler",
    "TravelerId",
    "TravelerCategory",
]
