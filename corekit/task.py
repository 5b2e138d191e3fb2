"""Poll results, wakers and the context passed to polled futures."""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["Context", "Poll", "Wake", "Waker"]


class Poll(Generic[T]):
    """Outcome of polling: ready with a value, or pending."""

    __slots__ = ("_ready", "_value")

    def __init__(self, ready: bool, value: Any = None) -> None:
        self._ready = ready
        self._value = value

    @classmethod
    def ready(cls, value: T) -> "Poll[T]":
        """A completed poll carrying ``value``."""
        return cls(True, value)

    @classmethod
    def pending(cls) -> "Poll[Any]":
        """A poll that has not completed."""
        return cls(False)

    def is_ready(self) -> bool:
        """Whether the poll completed."""
        return self._ready

    @property
    def value(self) -> T:
        if not self._ready:
            raise ValueError("poll is pending")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poll):
            return NotImplemented
        if self._ready != other._ready:
            return False
        return not self._ready or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Poll.ready({self._value!r})" if self._ready else "Poll.pending()"


class Wake(abc.ABC):
    """Something that can be woken to make progress."""

    @abc.abstractmethod
    def wake(self) -> None:
        """Wake this task."""


class Waker:
    """A handle that wakes a task."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Wake) -> None:
        if not callable(getattr(inner, "wake", None)):
            raise TypeError(f"{type(inner).__name__} has no wake method")
        self._inner = inner

    def wake(self) -> None:
        """Wake the task."""
        self._inner.wake()

    def wake_by_ref(self) -> None:
        """Wake the task, keeping this waker usable."""
        self._inner.wake()


class Context:
    """Context handed to a future when it is polled."""

    __slots__ = ("_waker",)

    def __init__(self, waker: Waker) -> None:
        self._waker = waker

    @classmethod
    def from_waker(cls, waker: Waker) -> "Context":
        """Build a context around ``waker``."""
        return cls(waker)

    def waker(self) -> Waker:
        """The waker for the current task."""
        return self._waker