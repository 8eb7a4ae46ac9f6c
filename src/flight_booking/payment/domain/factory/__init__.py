from .payment_factory import CardDetails, PaymentFactory

__all__ = ["CardDetails", "PaymentFactory"]
