"""
Outcome values returned by store operations.

Store methods never raise for expected conditions. They return a
``StoreResult`` tagged either with a value or with a ``StoreError``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class StoreError(str, Enum):
    """Failure kinds the store can report."""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Tagged success/failure outcome of a store operation."""

    value: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "StoreResult[T]":
        return cls(error=error)
