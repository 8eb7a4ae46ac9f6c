from .reservation_factory import ReservationFactory

__all__ = ["ReservationFactory"]
