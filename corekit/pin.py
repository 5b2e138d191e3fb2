"""Pinned handles to a value that may be read, and possibly replaced, in place."""

from __future__ import annotations

from typing import Generic, TypeVar

from corekit.cell import Cell

T = TypeVar("T")

__all__ = ["Pin"]


class Pin(Generic[T]):
    """A handle to a value that stays in one place.

    Views made with :meth:`as_ref` and :meth:`as_mut` share the same place,
    so a value stored through one view is seen through every other.  A
    read-only pin, such as one made by :meth:`static_ref` or :meth:`as_ref`,
    refuses every mutating operation with TypeError.
    """

    __slots__ = ("_slot", "_mutable")

    def __init__(self, pointer: T) -> None:
        self._slot: Cell[T] = Cell(pointer)
        self._mutable = True

    @classmethod
    def _view(cls, slot: Cell[T], mutable: bool) -> "Pin[T]":
        pin = cls.__new__(cls)
        pin._slot = slot
        pin._mutable = mutable
        return pin

    @classmethod
    def static_ref(cls, r: T) -> "Pin[T]":
        """Pin a value for reading only."""
        return cls._view(Cell(r), False)

    def __repr__(self) -> str:
        kind = "Pin" if self._mutable else "Pin.static_ref"
        return f"{kind}({self._slot.get()!r})"

    def _require_mutable(self, action: str) -> None:
        if not self._mutable:
            raise TypeError(f"cannot {action} through a read-only pin")

    @property
    def is_mutable(self) -> bool:
        """Whether this pin allows the value to be replaced."""
        return self._mutable

    def into_inner(self) -> T:
        """Return the pinned value."""
        return self._slot.get()

    def as_ref(self) -> "Pin[T]":
        """A read-only view of the same place."""
        return self._view(self._slot, False)

    def as_mut(self) -> "Pin[T]":
        """A mutable view of the same place."""
        self._require_mutable("take a mutable view")
        return self._view(self._slot, True)

    def set(self, value: T) -> None:
        """Replace the pinned value in place."""
        self._require_mutable("set the value")
        self._slot.replace(value)

    def get_ref(self) -> T:
        """Return the pinned value for reading."""
        return self._slot.get()

    def get_mut(self) -> T:
        """Return the pinned value for mutation."""
        self._require_mutable("get a mutable value")
        return self._slot.get()