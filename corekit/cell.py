"""Interior-mutability containers with checked borrowing."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

__all__ = [
    "AlreadySetError",
    "BorrowError",
    "Cell",
    "LazyCell",
    "OnceCell",
    "Ref",
    "RefCell",
    "RefMut",
]

_UNSET: Any = object()


class BorrowError(RuntimeError):
    """Raised when a borrow would break the shared/exclusive rules."""


class AlreadySetError(ValueError):
    """Raised when a OnceCell is set twice; carries the rejected value."""

    def __init__(self, value: Any) -> None:
        super().__init__("cell is already initialised")
        self.value = value


def _default_of(value: Any) -> Any:
    try:
        return type(value)()
    except TypeError as exc:
        raise TypeError(f"{type(value).__name__} has no default value") from exc


class Cell(Generic[T]):
    """A mutable slot whose value is replaced as a whole."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def replace(self, val: T) -> T:
        """Store ``val`` and return the previous value."""
        old, self._value = self._value, val
        return old

    def swap(self, other: "Cell[T]") -> None:
        """Exchange the values of two cells."""
        self._value, other._value = other._value, self._value

    def take(self) -> T:
        """Return the value, leaving its type's default in its place."""
        return self.replace(_default_of(self._value))

    def into_inner(self) -> T:
        """Return the contained value."""
        return self._value


class LazyCell(Generic[T]):
    """A value computed by a function on first access."""

    __slots__ = ("_init", "_value")

    def __init__(self, f: Callable[[], T]) -> None:
        self._init: Optional[Callable[[], T]] = f
        self._value: Any = _UNSET

    def get(self) -> T:
        """Return the value, computing it on the first call."""
        if self._value is _UNSET:
            assert self._init is not None
            self._value = self._init()
            self._init = None
        return self._value


class OnceCell(Generic[T]):
    """A slot that can be written at most once."""

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: Any = _UNSET

    def set(self, value: T) -> None:
        """Store ``value``; raise AlreadySetError if a value is present."""
        if self._value is not _UNSET:
            raise AlreadySetError(value)
        self._value = value

    def get(self) -> Optional[T]:
        """Return the value, or None if unset."""
        return None if self._value is _UNSET else self._value

    def into_inner(self) -> Optional[T]:
        """Return the value, or None if unset."""
        return self.get()


class RefCell(Generic[T]):
    """A container that checks shared and exclusive borrows at run time."""

    __slots__ = ("_value", "_readers", "_writing")

    def __init__(self, value: T) -> None:
        self._value = value
        self._readers = 0
        self._writing = False

    def __repr__(self) -> str:
        return f"RefCell({self._value!r})"

    def _acquire_shared(self) -> None:
        if self._writing:
            raise BorrowError("already mutably borrowed")
        self._readers += 1

    def _release_shared(self) -> None:
        if self._writing or self._readers == 0:
            raise BorrowError("no shared borrow to release")
        self._readers -= 1

    def _acquire_exclusive(self) -> None:
        if self._writing or self._readers:
            raise BorrowError("already borrowed")
        self._writing = True

    def _release_exclusive(self) -> None:
        if not self._writing:
            raise BorrowError("no exclusive borrow to release")
        self._writing = False

    def borrow(self) -> "Ref[T]":
        """Take a shared borrow; raise BorrowError if mutably borrowed."""
        return Ref(self)

    def borrow_mut(self) -> "RefMut[T]":
        """Take an exclusive borrow; raise BorrowError if borrowed at all."""
        return RefMut(self)

    def replace(self, t: T) -> T:
        """Store ``t`` and return the previous value."""
        with self.borrow_mut() as guard:
            old = guard.value
            guard.value = t
        return old

    def swap(self, other: "RefCell[T]") -> None:
        """Exchange the values of two cells."""
        with self.borrow_mut() as mine, other.borrow_mut() as theirs:
            mine.value, theirs.value = theirs.value, mine.value

    def take(self) -> T:
        """Return the value, leaving its type's default in its place."""
        return self.replace(_default_of(self._value))

    def into_inner(self) -> T:
        """Return the contained value."""
        return self._value


class Ref(Generic[T]):
    """A shared borrow of a RefCell; release it or use it as a context manager."""

    __slots__ = ("_cell", "_active")

    def __init__(self, cell: RefCell[T]) -> None:
        cell._acquire_shared()
        self._cell = cell
        self._active = True

    def __enter__(self) -> "Ref[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        if self._active:
            self.release()

    @property
    def value(self) -> T:
        if not self._active:
            raise BorrowError("borrow has been released")
        return self._cell._value

    def clone(self) -> "Ref[T]":
        """Take another shared borrow of the same cell."""
        if not self._active:
            raise BorrowError("borrow has been released")
        return Ref(self._cell)

    def release(self) -> None:
        """End this borrow."""
        if not self._active:
            raise BorrowError("borrow has already been released")
        self._cell._release_shared()
        self._active = False


class RefMut(Generic[T]):
    """An exclusive borrow of a RefCell; release it or use it as a context manager."""

    __slots__ = ("_cell", "_active")

    def __init__(self, cell: RefCell[T]) -> None:
        cell._acquire_exclusive()
        self._cell = cell
        self._active = True

    def __enter__(self) -> "RefMut[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        if self._active:
            self.release()

    @property
    def value(self) -> T:
        if not self._active:
            raise BorrowError("borrow has been released")
        return self._cell._value

    @value.setter
    def value(self, new: T) -> None:
        if not self._active:
            raise BorrowError("borrow has been released")
        self._cell._value = new

    def release(self) -> None:
        """End this borrow."""
        if not self._active:
            raise BorrowError("borrow has already been released")
        self._cell._release_exclusive()
        self._active = False