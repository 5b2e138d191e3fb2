"""Clone-on-write values."""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["Cow"]


class Cow(Generic[T]):
    """A value that is either owned or borrowed, copied on first mutation."""

    __slots__ = ("_value", "_owned")

    def __init__(self, value: T, owned: bool) -> None:
        self._value = value
        self._owned = owned

    @classmethod
    def owned(cls, value: T) -> "Cow[T]":
        """Wrap a value this Cow owns."""
        return cls(value, True)

    @classmethod
    def borrowed(cls, value: T) -> "Cow[T]":
        """Wrap a value shared with someone else."""
        return cls(value, False)

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"Cow.{kind}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cow):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def is_owned(self) -> bool:
        """Whether the value is owned."""
        return self._owned

    def to_mut(self) -> T:
        """Return an owned, mutable value, copying a borrowed one first."""
        if not self._owned:
            self._value = copy.deepcopy(self._value)
            self._owned = True
        return self._value

    def deref(self) -> Any:
        """Return the value, owned or borrowed, without copying."""
        return self._value