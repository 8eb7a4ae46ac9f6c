from datetime import datetime
from decimal import Decimal
from typing import TypedDict

from flight_booking.payment.domain.entity import Payment
from flight_booking.payment.domain.enum import PaymentStatus
from flight_booking.payment.domain.service import card_validator
from flight_booking.payment.domain.value_object import MaskedCardNumber, PaymentId
from flight_booking.shared.domain import IdGenerator, IsoDateTime
from flight_booking.shared.domain.exception import InvalidArgumentException
from flight_booking.shared.utils.clock import Clock, utc_now


class CardDetails(TypedDict):
    """Raw card input; lives only for the duration of `create`"""

    card_number: str
    cvv: str
    expiry: str


class PaymentFactory:
    """Payment factory

    - validates the card (number, then CVV, then expiry; first failure wins)
    - keeps only the masked card number
    - new payments start PENDING
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self._id_generator = id_generator
        self._clock = clock

    def create(
        self,
        reservation_id: str,
        amount: Decimal,
        card_details: CardDetails,
    ) -> Payment:
        now = self._clock()
        self._validate_card(card_details, now)

        return Payment(
            id=PaymentId(self._id_generator.next_id()),
            reservation_id=reservation_id,
            amount=amount,
            card=MaskedCardNumber.from_raw(card_details["card_number"]),
            created_at=IsoDateTime(now),
            status=PaymentStatus.PENDING,
        )

    @staticmethod
    def _validate_card(card_details: CardDetails, now: datetime) -> None:
        if not card_validator.is_valid_card_number(card_details["card_number"]):
            raise InvalidArgumentException("Invalid card number", field="card_number")
        if not card_validator.is_valid_cvv(card_details["cvv"]):
            raise InvalidArgumentException("Invalid CVV", field="cvv")
        if not card_validator.is_valid_expiry(card_details["expiry"], now.date()):
            raise InvalidArgumentException("Invalid expiry date", field="expiry")
