from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingSettings:
    """Id prefixes and sequence bases

    Sequences start above a reserved base, so RES1001 is the first
    reservation id with the defaults.
    """

    reservation_id_prefix: str = "RES"
    reservation_id_start: int = 1000
    payment_id_prefix: str = "PAY"
    payment_id_start: int = 5000

    @classmethod
    def from_env(cls) -> BookingSettings:
        return cls(
            reservation_id_prefix=os.getenv("RESERVATION_ID_PREFIX", "RES"),
            reservation_id_start=int(os.getenv("RESERVATION_ID_START", "1000")),
            payment_id_prefix=os.getenv("PAYMENT_ID_PREFIX", "PAY"),
            payment_id_start=int(os.getenv("PAYMENT_ID_START", "5000")),
        )
