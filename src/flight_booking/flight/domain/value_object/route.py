from dataclasses import dataclass

from flight_booking.shared.domain.exception import InvalidArgumentException
from flight_booking.shared.utils.validators import require_text


def same_city(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


@dataclass(frozen=True)
class Route:
    """Source and destination city of a flight"""

    source: str
    destination: str

    def __post_init__(self) -> None:
        require_text(self.source, "source")
        require_text(self.destination, "destination")
        if same_city(self.source, self.destination):
            raise InvalidArgumentException(
                "Source and destination cannot be same", field="destination"
            )

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"

    def matches(self, source: str, destination: str) -> bool:
        """Case-insensitive match on both ends"""
        return same_city(self.source, source) and same_city(
            self.destination, destination
        )
