from .reservation_id import ReservationId
from .traveler_id import TravelerId

__all__ = ["ReservationId", "TravelerId"]
