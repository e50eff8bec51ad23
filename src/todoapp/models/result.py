"""Outcome type returned by data source reads."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful read carrying its value."""

    value: T


@dataclass(frozen=True)
class Error:
    """A failed read carrying the exception that caused it."""

    cause: Exception


Result = Success[T] | Error
