from __future__ import annotations

from enum import Enum


class TravelerCategory(str, Enum):
    """Fare category derived from age"""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"

    @classmethod
    def from_age(cls, age: int) -> TravelerCategory:
        if age < 2:
            return cls.INFANT
        if age < 18:
            return cls.CHILD
        return cls.ADULT
