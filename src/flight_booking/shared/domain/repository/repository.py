from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Port for keeping aggregates of one kind

    Every context in this package scans its aggregates for queries, so
    `find_all` is part of the base contract.
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """Insert or replace by id"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """Every stored aggregate, in insertion order"""
        raise NotImplementedError
