from decimal import Decimal, InvalidOperation

from flight_booking.shared.domain.exception import InvalidArgumentException

MISSING_ARGUMENT_MESSAGES: dict[str, str] = {
    "flight": "Flight cannot be empty",
    "flight_id": "Flight ID cannot be empty",
    "traveler": "Traveler cannot be empty",
    "reservation": "Reservation cannot be empty",
    "reservation_id": "Reservation ID cannot be empty",
    "payment_id": "Payment ID cannot be empty",
    "email": "Traveler email cannot be empty",
    "source": "Source city cannot be empty",
    "destination": "Destination city cannot be empty",
    "travel_date": "Travel date cannot be empty",
}


def missing_argument(field: str) -> InvalidArgumentException:
    """Build the fixed error for a missing `field`"""
    return InvalidArgumentException(MISSING_ARGUMENT_MESSAGES[field], field=field)


def require_present(value: object, field: str) -> None:
    if value is None:
        raise missing_argument(field)


def require_text(value: str | None, field: str) -> str:
    """Reject None and blank strings, returning the value unchanged"""
    if value is None or not value.strip():
        raise missing_argument(field)
    return value


def to_decimal(v: object) -> Decimal:
    """Convert any numeric value to Decimal

    Decimals pass through untouched; everything else goes through str so that
    floats keep their printed value.
    """
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise InvalidArgumentException(f"Not a number: {v}") from e
