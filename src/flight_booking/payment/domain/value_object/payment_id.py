from dataclasses import dataclass

from flight_booking.shared.utils.validators import require_text


@dataclass(frozen=True)
class PaymentId:
    """Payment identifier (Value Object)"""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "payment_id")

    def __str__(self) -> str:
        return self.value
