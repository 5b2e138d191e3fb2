"""Three-way comparison, min/max selection and a reversing wrapper."""

from __future__ import annotations

import enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")

__all__ = [
    "Ordering",
    "Reverse",
    "cmp",
    "max",
    "max_by",
    "max_by_key",
    "min",
    "min_by",
    "min_by_key",
]


class Ordering(enum.IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _partial_cmp(a: Any, b: Any) -> Optional[Ordering]:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return None


def cmp(a: Any, b: Any) -> Ordering:
    """Compare two totally ordered values.

    Raises TypeError when the values have no defined order (for example NaN).
    """
    result = _partial_cmp(a, b)
    if result is None:
        raise TypeError(f"{a!r} and {b!r} are not totally ordered")
    return result


def max_by(v1: T, v2: T, compare: Callable[[T, T], Ordering]) -> T:
    """Return the greater value by ``compare``; ``v2`` when they are equal."""
    if compare(v1, v2) is Ordering.GREATER:
        return v1
    return v2


def min_by(v1: T, v2: T, compare: Callable[[T, T], Ordering]) -> T:
    """Return the lesser value by ``compare``; ``v1`` when they are equal."""
    if compare(v1, v2) is Ordering.GREATER:
        return v2
    return v1


def max(v1: T, v2: T) -> T:
    """Return the greater of two values; ``v2`` when they are equal."""
    return max_by(v1, v2, cmp)


def min(v1: T, v2: T) -> T:
    """Return the lesser of two values; ``v1`` when they are equal."""
    return min_by(v1, v2, cmp)


def max_by_key(v1: T, v2: T, f: Callable[[T], K]) -> T:
    """Return the value with the greater key; ``v2`` when keys are equal."""
    return max_by(v1, v2, lambda a, b: cmp(f(a), f(b)))


def min_by_key(v1: T, v2: T, f: Callable[[T], K]) -> T:
    """Return the value with the lesser key; ``v1`` when keys are equal."""
    return min_by(v1, v2, lambda a, b: cmp(f(a), f(b)))


class Reverse(Generic[T]):
    """Wrapper whose ordering is the reverse of the wrapped value's."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Reverse({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    def __le__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value <= self.value

    def __gt__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value > self.value

    def __ge__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value >= self.value

    def partial_cmp(self, other: "Reverse[T]") -> Optional[Ordering]:
        """Reversed comparison, or None when the values are unordered."""
        return _partial_cmp(other.value, self.value)

    def cmp(self, other: "Reverse[T]") -> Ordering:
        """Reversed total comparison."""
        return cmp(other.value, self.value)