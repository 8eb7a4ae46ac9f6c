class DomainException(Exception):
    """Base exception raised by the domain layer"""

    pass


class InvalidArgumentException(DomainException):
    """Malformed or missing input

    `field` names the offending argument so callers can branch on it.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class IllegalStateException(DomainException):
    """Well-formed request that conflicts with the entity's current state"""

    pass
