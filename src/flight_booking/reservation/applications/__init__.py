from .reservation_coordinator import ReservationCoordinator

__all__ = ["ReservationCoordinator"]
