from decimal import Decimal

from flight_booking.payment.domain.enum import PaymentStatus
from flight_booking.payment.domain.value_object import MaskedCardNumber, PaymentId
from flight_booking.shared.domain import Entity, IsoDateTime
from flight_booking.shared.domain.exception import (
    IllegalStateException,
    InvalidArgumentException,
)


class Payment(Entity[PaymentId]):
    """Payment record for a reservation

    Holds the reservation id only, never the Reservation itself, and only the
    masked form of the card.
    """

    def __init__(
        self,
        id: PaymentId,
        reservation_id: str,
        amount: Decimal,
        card: MaskedCardNumber,
        created_at: IsoDateTime,
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        if amount <= 0:
            raise InvalidArgumentException("Amount must be positive", field="amount")

        super().__init__(id)
        self._reservation_id = reservation_id
        self._amount = amount
        self._card = card
        self._created_at = created_at
        self._status = status

    @property
    def reservation_id(self) -> str:
        return self._reservation_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def card(self) -> MaskedCardNumber:
        return self._card

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> PaymentStatus:
        return self._status

    def complete(self) -> None:
        """Mark as settled"""
        if self._status != PaymentStatus.PENDING:
            raise IllegalStateException(
                f"Cannot complete payment in {self._status.value} status"
            )
        self._status = PaymentStatus.SUCCESS

    def fail(self) -> None:
        """Mark as declined"""
        if self._status != PaymentStatus.PENDING:
            raise IllegalStateException(
                f"Cannot fail payment in {self._status.value} status"
            )
        self._status = PaymentStatus.FAILED

    def refund(self) -> None:
        """Refund a settled payment. Only SUCCESS can be refunded."""
        if self._status != PaymentStatus.SUCCESS:
            raise IllegalStateException("Cannot refund unsuccessful payment")
        self._status = PaymentStatus.REFUNDED
