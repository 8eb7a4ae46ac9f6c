from dataclasses import dataclass


@dataclass(frozen=True)
class TravelerId:
    """Traveler identifier"""

    value: str

    def __str__(self) -> str:
        return self.value
