from abc import ABC, abstractmethod

from flight_booking.payment.domain.entity import Payment


class Settlement(ABC):
    """Settles a validated payment"""

    @abstractmethod
    def settle(self, payment: Payment) -> bool:
        raise NotImplementedError


class InstantSettlement(Settlement):
    """Synchronous settlement that approves every validated payment"""

    def settle(self, payment: Payment) -> bool:
        return True
