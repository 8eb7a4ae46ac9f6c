from .reservation_status import ReservationStatus
from .traveler_category import TravelerCategory

__all__ = ["ReservationStatus", "TravelerCategory"]
