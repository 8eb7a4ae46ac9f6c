from .entity import Payment
from .enum import PaymentStatus
from .factory import CardDetails, PaymentFactory
from .repository import PaymentRepository
from .settlement import InstantSettlement, Settlement
from .value_object import MaskedCardNumber, PaymentId

__all__ = [
    "Payment",
    "PaymentId",
    "PaymentStatus",
    "MaskedCardNumber",
    "CardDetails",
    "PaymentFactory",
    "PaymentRepository",
    "Settlement",
    "InstantSettlement",
]
