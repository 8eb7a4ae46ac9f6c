from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Source of identifiers for newly created aggregates"""

    @abstractmethod
    def next_id(self) -> str:
        raise NotImplementedError


class SequentialIdGenerator(IdGenerator):
    """Fixed prefix followed by a monotonically increasing integer

    The counter starts above `start`, so the first id is `prefix + (start + 1)`.
    Keeping the base high makes generated ids easy to tell apart from fixtures.
    """

    def __init__(self, prefix: str, start: int = 0) -> None:
        if not prefix:
            raise ValueError("Id prefix cannot be empty")
        if start < 0:
            raise ValueError("Id sequence cannot start below zero")
        self._prefix = prefix
        self._counter = start

    @property
    def prefix(self) -> str:
        return self._prefix

    def next_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}{self._counter}"
