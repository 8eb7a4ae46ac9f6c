from .in_memory_reservation_repository import InMemoryReservationRepository

__all__ = ["InMemoryReservationRepository"]
