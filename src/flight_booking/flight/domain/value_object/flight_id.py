from dataclasses import dataclass

from flight_booking.shared.utils.validators import require_text


@dataclass(frozen=True)
class FlightId:
    """Flight identifier

    Lookups through the search service ignore case; equality does not.
    """

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "flight_id")

    def __str__(self) -> str:
        return self.value
