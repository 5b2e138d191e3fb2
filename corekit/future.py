"""Futures driven by explicit polling, and a few simple ones."""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, TypeVar

from corekit.task import Context, Poll

T = TypeVar("T")

__all__ = [
    "Future",
    "IntoFuture",
    "Pending",
    "PollFn",
    "Ready",
    "pending",
    "poll_fn",
    "ready",
]


class Future(abc.ABC, Generic[T]):
    """A computation that completes when polled often enough."""

    @abc.abstractmethod
    def poll(self, cx: Context) -> Poll[T]:
        """Advance the computation; return ready with the output or pending."""


class IntoFuture(abc.ABC, Generic[T]):
    """Something that can be turned into a future."""

    @abc.abstractmethod
    def into_future(self) -> Future[T]:
        """Return the future this value stands for."""


class Pending(Future[T]):
    """A future that never completes."""

    __slots__ = ()

    def poll(self, cx: Context) -> Poll[T]:
        return Poll.pending()


class PollFn(Future[T]):
    """A future whose polling is done by a function of the context."""

    __slots__ = ("_f",)

    def __init__(self, f: Callable[[Context], Poll[T]]) -> None:
        self._f = f

    def poll(self, cx: Context) -> Poll[T]:
        return self._f(cx)


class Ready(Future[T]):
    """A future that is ready at once with a value; it may be polled only once."""

    __slots__ = ("_value", "_taken")

    def __init__(self, value: T) -> None:
        self._value: Any = value
        self._taken = False

    def poll(self, cx: Context) -> Poll[T]:
        if self._taken:
            raise RuntimeError("Ready polled after completion")
        value, self._value = self._value, None
        self._taken = True
        return Poll.ready(value)


def pending() -> Pending[Any]:
    """Return a future that never completes."""
    return Pending()


def poll_fn(f: Callable[[Context], Poll[T]]) -> PollFn[T]:
    """Return a future that polls by calling ``f`` with the context."""
    return PollFn(f)


def ready(t: T) -> Ready[T]:
    """Return a future that is immediately ready with ``t``."""
    return Ready(t)