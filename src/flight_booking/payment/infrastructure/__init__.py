from .in_memory_payment_repository import InMemoryPaymentRepository

__all__ = ["InMemoryPaymentRepository"]
