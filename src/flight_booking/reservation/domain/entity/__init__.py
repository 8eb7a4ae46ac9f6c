from .reservation import Reservation
from .traveler import Traveler

__all__ = ["Reservation", "Traveler"]
