from __future__ import annotations

from pydantic import BaseModel

from flight_booking.payment.applications import PaymentLedger
from flight_booking.payment.domain.entity import Payment


class PaymentData(BaseModel):
    """Payment response model"""

    payment_id: str
    reservation_id: str
    amount: str
    card: str
    status: str
    created_at: str


class SuccessResponse(BaseModel):
    status: str = "success"
    data: PaymentData


class LedgerSummary(BaseModel):
    """Revenue figures at the time of the call"""

    total_payments: int
    successful_payments: int
    failed_payments: int
    total_revenue: str


def to_response(payment: Payment) -> dict:
    """Render a Payment as a response dict; only the masked card appears"""
    return SuccessResponse(
        data=PaymentData(
            payment_id=str(payment.id),
            reservation_id=payment.reservation_id,
            amount=str(payment.amount),
            card=str(payment.card),
            status=payment.status.value,
            created_at=str(payment.created_at),
        )
    ).model_dump()


def summarize(ledger: PaymentLedger) -> dict:
    return LedgerSummary(
        total_payments=ledger.total_payments(),
        successful_payments=ledger.successful_count(),
        failed_payments=ledger.failed_count(),
        total_revenue=str(ledger.total_revenue()),
    ).model_dump()
