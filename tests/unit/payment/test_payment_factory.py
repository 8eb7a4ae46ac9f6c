from decimal import Decimal

import pytest

from flight_booking.payment.domain import (
    CardDetails,
    Payment,
    PaymentFactory,
    PaymentStatus,
)
from flight_booking.shared.domain.exception import InvalidArgumentException


class TestPaymentFactory:
    @pytest.fixture
    def factory(self, payment_ids, fixed_clock):
        return PaymentFactory(payment_ids, clock=fixed_clock)

    @pytest.fixture
    def card_details(self) -> CardDetails:
        return {"card_number": "4532 0151 1283 0366", "cvv": "123", "expiry": "12/27"}

    def test_create_payment(self, factory, card_details, fixed_clock):
        payment = factory.create("RES1001", Decimal("5000"), card_details)

        assert isinstance(payment, Payment)
        assert str(payment.id) == "PAY5001"
        assert payment.reservation_id == "RES1001"
        assert payment.status == PaymentStatus.PENDING
        assert payment.created_at.value == fixed_clock()

    def test_only_masked_card_is_kept(self, factory, card_details):
        payment = factory.create("RES1001", Decimal("5000"), card_details)
        assert str(payment.card) == "4532****0366"
        assert not any(
            "4532015112830366" in str(v) or v == "123" for v in vars(payment).values()
        )

    @pytest.mark.parametrize(
        "overrides, message, field",
        [
            ({"card_number": "4532015112830367"}, "Invalid card number", "card_number"),
            ({"cvv": "12"}, "Invalid CVV", "cvv"),
            ({"expiry": "05/25"}, "Invalid expiry date", "expiry"),
        ],
    )
    def test_invalid_card_raises_error(
        self, factory, card_details, overrides, message, field
    ):
        with pytest.raises(InvalidArgumentException, match=message) as exc_info:
            factory.create("RES1001", Decimal("5000"), {**card_details, **overrides})
        assert exc_info.value.field == field

    def test_card_number_is_checked_first(self, factory):
        with pytest.raises(InvalidArgumentException, match="Invalid card number"):
            factory.create(
                "RES1001",
                Decimal("5000"),
                {"card_number": "1234", "cvv": "x", "expiry": "bad"},
            )

    def test_cvv_is_checked_before_expiry(self, factory, card_details):
        with pytest.raises(InvalidArgumentException, match="Invalid CVV"):
            factory.create(
                "RES1001",
                Decimal("5000"),
                {**card_details, "cvv": "12345", "expiry": "13/25"},
            )

    def test_failed_validation_does_not_consume_an_id(self, factory, card_details):
        with pytest.raises(InvalidArgumentException):
            factory.create("RES1001", Decimal("5000"), {**card_details, "cvv": ""})
        payment = factory.create("RES1001", Decimal("5000"), card_details)
        assert str(payment.id) == "PAY5001"
