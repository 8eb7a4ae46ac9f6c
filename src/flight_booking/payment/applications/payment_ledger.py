from decimal import Decimal

from flight_booking.payment.domain.entity import Payment
from flight_booking.payment.domain.enum import PaymentStatus
from flight_booking.payment.domain.factory import CardDetails, PaymentFactory
from flight_booking.payment.domain.repository import PaymentRepository
from flight_booking.payment.domain.settlement import InstantSettlement, Settlement
from flight_booking.payment.domain.value_object import PaymentId
from flight_booking.shared.domain.exception import InvalidArgumentException
from flight_booking.shared.utils.logger import get_logger
from flight_booking.shared.utils.validators import require_text, to_decimal

logger = get_logger("payment-service")


class PaymentLedger:
    """Charges, refunds and revenue figures

    Aggregates are folded over the stored payments on every call, so a refund
    takes its amount out of revenue retroactively.
    """

    def __init__(
        self,
        repository: PaymentRepository,
        factory: PaymentFactory,
        settlement: Settlement | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._settlement = settlement or InstantSettlement()

    def charge(
        self,
        reservation_id: str,
        amount: Decimal | int | float,
        card_number: str,
        cvv: str,
        expiry: str,
    ) -> Payment:
        """Validate the card and record a settled (or declined) payment"""
        require_text(reservation_id, "reservation_id")
        value = to_decimal(amount)
        if not value.is_finite() or value <= 0:
            raise InvalidArgumentException("Amount must be positive", field="amount")

        card_details: CardDetails = {
            "card_number": card_number,
            "cvv": cvv,
            "expiry": expiry,
        }
        payment = self._factory.create(reservation_id, value, card_details)

        if self._settlement.settle(payment):
            payment.complete()
            logger.info(
                "Payment charged",
                extra={
                    "payment_id": str(payment.id),
                    "reservation_id": reservation_id,
                    "amount": str(value),
                    "card": str(payment.card),
                },
            )
        else:
            payment.fail()
            logger.info(
                "Payment declined",
                extra={
                    "payment_id": str(payment.id),
                    "reservation_id": reservation_id,
                    "card": str(payment.card),
                },
            )

        self._repository.save(payment)
        return payment

    def refund(self, payment_id: str) -> bool:
        """Refund a SUCCESS payment; False when the id is unknown"""
        payment = self.find_payment(payment_id)
        if payment is None:
            return False

        payment.refund()
        self._repository.save(payment)
        logger.info(
            "Payment refunded",
            extra={"payment_id": str(payment.id), "amount": str(payment.amount)},
        )
        return True

    def find_payment(self, payment_id: str) -> Payment | None:
        require_text(payment_id, "payment_id")
        return self._repository.find_by_id(PaymentId(payment_id))

    def payments_for_reservation(self, reservation_id: str) -> list[Payment]:
        require_text(reservation_id, "reservation_id")
        return self._repository.find_by_reservation_id(reservation_id)

    def total_payments(self) -> int:
        return len(self._repository.find_all())

    def total_revenue(self) -> Decimal:
        return sum(
            (p.amount for p in self._with_status(PaymentStatus.SUCCESS)),
            Decimal("0"),
        )

    def successful_count(self) -> int:
        return len(self._with_status(PaymentStatus.SUCCESS))

    def failed_count(self) -> int:
        return len(self._with_status(PaymentStatus.FAILED))

    def _with_status(self, status: PaymentStatus) -> list[Payment]:
        return [p for p in self._repository.find_all() if p.status == status]
