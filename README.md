# corekit

A handful of small building blocks that depend only on the standard library:

- **`corekit.cmp`** provides the `Ordering` enum (`LESS`, `EQUAL`, `GREATER`) and `cmp`.
  `cmp` raises `TypeError` for values that have no order, such as NaN.
  It also provides `min` and `max` with their `_by` and `_by_key` variants.
  On a tie, `min` returns the first argument and `max` returns the second.
  `Reverse` is a wrapper whose comparisons, `cmp` and `partial_cmp` are flipped.
- **`corekit.cell`** provides four containers:
  - `Cell` has `get`, `replace`, `swap`, `take` and `into_inner`.
    `take` leaves the value's type default in its place.
  - `OnceCell`: `set` raises `AlreadySetError` on a second call. The error carries the rejected value in `.value`.
  - `LazyCell` computes its value on the first `get`.
  - `RefCell` hands out `Ref` and `RefMut` borrow guards. A conflicting borrow raises `BorrowError`.
    The guards expose `.value`, can be used as context managers, and are ended with `release()`.
- **`corekit.borrow`** provides `Cow`, made with `Cow.owned(...)` or `Cow.borrowed(...)`.
  `to_mut()` deep-copies a borrowed value the first time it is called.
  `deref()` returns the value without copying.
- **`corekit.task`** provides:
  - `Poll`, made with `Poll.ready(value)` or `Poll.pending()`. Reading `.value` of a pending poll raises `ValueError`.
  - the abstract `Wake` class.
  - `Waker`, which has `wake` and `wake_by_ref`.
  - `Context`, made with `Context.from_waker(...)`.
- **`corekit.pin`** provides `Pin`, a handle to a value held in one place.
  `as_ref()` gives a read-only view of the same place and `as_mut()` gives a mutable one.
  `set` replaces the value in place, and every view sees the change.
  Through a read-only pin, such as one made with `Pin.static_ref(...)`, the mutating calls raise `TypeError`.
  Those calls are `set`, `as_mut` and `get_mut`.
- **`corekit.future`** provides the abstract `Future` (`poll(cx)`) and `IntoFuture` (`into_future()`) classes.
  It also provides three ready-made futures:
  - `ready(t)` completes on its first poll. Polling it again raises `RuntimeError`.
  - `pending()` never completes.
  - `poll_fn(f)` polls by calling `f(cx)`.

## Installation

```
pip install .
```

## Examples

```python
from corekit.cmp import Ordering, Reverse, cmp, max_by_key, min

assert cmp(1, 2) is Ordering.LESS
assert min(3, 3) == 3
assert max_by_key("ab", "xyz", len) == "xyz"
assert Reverse(1).cmp(Reverse(2)) is Ordering.GREATER
```

```python
from corekit.cell import BorrowError, RefCell

cell = RefCell([1, 2])
with cell.borrow_mut() as items:
    items.value.append(3)

reader = cell.borrow()
try:
    cell.borrow_mut()
except BorrowError:
    pass
reader.release()
assert cell.into_inner() == [1, 2, 3]
```

```python
from corekit.borrow import Cow

shared = [1, 2]
cow = Cow.borrowed(shared)
cow.to_mut().append(3)
assert shared == [1, 2]
assert cow.deref() == [1, 2, 3]
assert cow.is_owned()
```

```python
from corekit.future import poll_fn, ready
from corekit.task import Context, Poll, Wake, Waker


class Noop(Wake):
    def wake(self):
        pass


cx = Context.from_waker(Waker(Noop()))
assert ready(42).poll(cx) == Poll.ready(42)
assert not poll_fn(lambda cx: Poll.pending()).poll(cx).is_ready()
```

## What it does not do

- There is no executor or event loop. Futures are advanced only by calling `poll` yourself with a `Context`.
- They are unrelated to `asyncio` and cannot be awaited.
- None of the containers use locks, so they are not meant to be shared between threads.

## Running the tests

```
pip install ".[test]"
pytest
```