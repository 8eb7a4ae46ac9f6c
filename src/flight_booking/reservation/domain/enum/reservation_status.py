from enum import Enum


class ReservationStatus(str, Enum):
    """Reservation status

    PENDING -> CONFIRMED -> CANCELLED, or PENDING -> WITHDRAWN for a
    reservation dropped before confirmation. CANCELLED and WITHDRAWN are
    terminal.
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    WITHDRAWN = "WITHDRAWN"

    def can_transition_to(self, target: "ReservationStatus") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.WITHDRAWN}
    ),
    ReservationStatus.CONFIRMED: frozenset({ReservationStatus.CANCELLED}),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.WITHDRAWN: frozenset(),
}
