from .masked_card_number import MaskedCardNumber
from .payment_id import PaymentId

__all__ = ["MaskedCardNumber", "PaymentId"]
