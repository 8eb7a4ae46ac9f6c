from flight_booking.reservation.domain.enum import TravelerCategory
from flight_booking.reservation.domain.value_object import TravelerId
from flight_booking.shared.domain import Entity
from flight_booking.shared.domain.exception import InvalidArgumentException

MIN_AGE = 0
MAX_AGE = 150


class Traveler(Entity[TravelerId]):
    """Person travelling on a reservation. Immutable once built."""

    def __init__(
        self,
        id: TravelerId,
        first_name: str,
        last_name: str,
        email: str,
        phone_number: str,
        age: int,
    ) -> None:
        if first_name is None or not first_name.strip():
            raise InvalidArgumentException(
                "First name cannot be empty", field="first_name"
            )
        if last_name is None or not last_name.strip():
            raise InvalidArgumentException(
                "Last name cannot be empty", field="last_name"
            )
        if isinstance(age, bool) or not isinstance(age, int):
            raise InvalidArgumentException("Age must be a whole number", field="age")
        if not MIN_AGE <= age <= MAX_AGE:
            raise InvalidArgumentException(
                f"Age must be between {MIN_AGE} and {MAX_AGE}", field="age"
            )

        super().__init__(id)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._phone_number = phone_number
        self._age = age

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def age(self) -> int:
        return self._age

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def category(self) -> TravelerCategory:
        return TravelerCategory.from_age(self._age)

    def is_adult(self) -> bool:
        return self.category == TravelerCategory.ADULT

    def is_child(self) -> bool:
        return self.category == TravelerCategory.CHILD

    def is_infant(self) -> bool:
        return self.category == TravelerCategory.INFANT

    def has_email(self, email: str) -> bool:
        """Case-insensitive contact address match"""
        if not self._email:
            return False
        return self._email.strip().lower() == email.strip().lower()
