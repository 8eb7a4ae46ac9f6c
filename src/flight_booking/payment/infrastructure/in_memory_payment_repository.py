from flight_booking.payment.domain.entity import Payment
from flight_booking.payment.domain.repository import PaymentRepository
from flight_booking.payment.domain.value_object import PaymentId


class InMemoryPaymentRepository(PaymentRepository):
    """PaymentRepository kept in process memory, in insertion order"""

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}

    def save(self, payment: Payment) -> None:
        self._payments[payment.id] = payment

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        return self._payments.get(payment_id)

    def find_by_reservation_id(self, reservation_id: str) -> list[Payment]:
        return [
            p for p in self._payments.values() if p.reservation_id == reservation_id
        ]

    def find_all(self) -> list[Payment]:
        return list(self._payments.values())
