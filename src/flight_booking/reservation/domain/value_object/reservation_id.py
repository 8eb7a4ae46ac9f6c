from dataclasses import dataclass

from flight_booking.shared.utils.validators import require_text


@dataclass(frozen=True)
class ReservationId:
    """Reservation identifier (exact match, case-sensitive)"""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "reservation_id")

    def __str__(self) -> str:
        return self.value
