from decimal import Decimal

import pytest

from flight_booking.payment.domain import (
    MaskedCardNumber,
    Payment,
    PaymentId,
    PaymentStatus,
)
from flight_booking.shared.domain import IsoDateTime

VALID_CARD = "4532015112830366"


@pytest.fixture
def create_payment():
    """Payment factory fixture (factories as fixtures)"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: str = "PAY-TEST-1",
        reservation_id: str = "RES1001",
        amount: Decimal = Decimal("5000"),
    ) -> Payment:
        return Payment(
            id=PaymentId(value=payment_id),
            reservation_id=reservation_id,
            amount=amount,
            card=MaskedCardNumber.from_raw(VALID_CARD),
            created_at=IsoDateTime.from_string("2025-06-15T09:30:00+00:00"),
            status=status,
        )

    return _factory
