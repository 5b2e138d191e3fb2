import pytest

from corekit.future import (
    Future,
    IntoFuture,
    Pending,
    PollFn,
    Ready,
    pending,
    poll_fn,
    ready,
)
from corekit.task import Context, Poll, Wake, Waker


class CountingWake(Wake):
    def __init__(self):
        self.count = 0

    def wake(self):
        self.count += 1


@pytest.fixture
def waker_state():
    return CountingWake()


@pytest.fixture
def cx(waker_state):
    return Context.from_waker(Waker(waker_state))


def test_ready_returns_value(cx):
    assert ready("done").poll(cx) == Poll.ready("done")


def test_ready_second_poll_raises(cx):
    fut = ready(1)
    assert fut.poll(cx).value == 1
    with pytest.raises(RuntimeError):
        fut.poll(cx)


def test_ready_class_matches_function(cx):
    assert Ready([1]).poll(cx).value == [1]


def test_pending_never_completes(cx):
    fut = pending()
    results = [fut.poll(cx).is_ready() for _ in range(3)]
    assert results == [False, False, False]


def test_pending_class_polls_pending(cx):
    assert Pending().poll(cx) == Poll.pending()


def test_poll_fn_receives_context(cx):
    seen = []

    def f(context):
        seen.append(context)
        return Poll.ready("ok")

    assert poll_fn(f).poll(cx) == Poll.ready("ok")
    assert seen == [cx]


def test_poll_fn_wakes_then_completes(cx, waker_state):
    state = {"polled": False}

    def f(context):
        if state["polled"]:
            return Poll.ready("finished")
        state["polled"] = True
        context.waker().wake_by_ref()
        return Poll.pending()

    fut = PollFn(f)
    assert fut.poll(cx).is_ready() is False
    assert waker_state.count == 1
    assert fut.poll(cx) == Poll.ready("finished")


def test_future_is_abstract():
    with pytest.raises(TypeError):
        Future()


def test_into_future_is_abstract():
    with pytest.raises(TypeError):
        IntoFuture()


def test_custom_future_and_into_future(cx):
    class Countdown(Future):
        def __init__(self, steps):
            self.steps = steps

        def poll(self, context):
            if self.steps == 0:
                return Poll.ready("lift-off")
            self.steps -= 1
            return Poll.pending()

    class Launch(IntoFuture):
        def into_future(self):
            return Countdown(2)

    fut = Launch().into_future()
    outcomes = [fut.poll(cx) for _ in range(3)]
    assert [o.is_ready() for o in outcomes] == [False, False, True]
    assert outcomes[-1].value == "lift-off"