from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class IsoDateTime:
    """Date and time (ISO 8601)"""

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """Build from an ISO 8601 string"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()

    def date(self) -> date:
        return self.value.date()

    def is_aware(self) -> bool:
        return self.value.utcoffset() is not None

    def is_before(self, other: IsoDateTime) -> bool:
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        return self.value > other.value

    def minutes_until(self, other: IsoDateTime) -> int:
        """Whole minutes from this moment to `other`"""
        return int((other.value - self.value).total_seconds() // 60)
