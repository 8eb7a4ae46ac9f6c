from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from flight_booking.payment.domain.service.card_validator import (
    MASK_PLACEHOLDER,
    mask_card_number,
)


@dataclass(frozen=True)
class MaskedCardNumber:
    """Display-safe card number: XXXX****YYYY

    The only form of a card number that outlives validation.
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{4}\*{4}[0-9]{4}")

    def __post_init__(self) -> None:
        if self.value != MASK_PLACEHOLDER and not self.PATTERN.fullmatch(self.value):
            raise ValueError(f"Not a masked card number: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_raw(cls, raw: str) -> MaskedCardNumber:
        return cls(value=mask_card_number(raw))
