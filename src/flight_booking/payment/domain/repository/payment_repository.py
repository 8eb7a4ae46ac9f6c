from abc import abstractmethod

from flight_booking.payment.domain.entity import Payment
from flight_booking.payment.domain.value_object import PaymentId
from flight_booking.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """Payment repository port"""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_reservation_id(self, reservation_id: str) -> list[Payment]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Payment]:
        raise NotImplementedError
