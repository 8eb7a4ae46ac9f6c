from enum import Enum


class PaymentStatus(str, Enum):
    """Payment status"""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
