from .payment_ledger import PaymentLedger

__all__ = ["PaymentLedger"]
