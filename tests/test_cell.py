import pytest

from corekit.cell import (
    AlreadySetError,
    BorrowError,
    Cell,
    LazyCell,
    OnceCell,
    RefCell,
)


def test_cell_get_and_replace():
    cell = Cell(1)
    assert cell.replace(2) == 1
    assert cell.get() == 2


def test_cell_swap():
    a, b = Cell("a"), Cell("b")
    a.swap(b)
    assert (a.get(), b.get()) == ("b", "a")


def test_cell_take_leaves_default():
    cell = Cell([1, 2])
    assert cell.take() == [1, 2]
    assert cell.into_inner() == []


def test_cell_take_int():
    cell = Cell(9)
    assert cell.take() == 9
    assert cell.get() == 0


def test_cell_take_without_default():
    cell = Cell(object.__new__(type("NoDefault", (), {"__init__": lambda self, x: None})))
    with pytest.raises(TypeError):
        cell.take()


def test_lazy_cell_computes_once():
    calls = []

    def make():
        calls.append(1)
        return "value"

    lazy = LazyCell(make)
    assert calls == []
    assert lazy.get() == "value"
    assert lazy.get() == "value"
    assert len(calls) == 1


def test_once_cell_set_once():
    cell = OnceCell()
    assert cell.get() is None
    cell.set(5)
    assert cell.get() == 5
    with pytest.raises(AlreadySetError) as info:
        cell.set(6)
    assert info.value.value == 6
    assert cell.into_inner() == 5


def test_once_cell_empty_into_inner():
    assert OnceCell().into_inner() is None


def test_refcell_many_shared_borrows():
    cell = RefCell([1])
    first = cell.borrow()
    second = cell.borrow()
    assert first.value is second.value
    with pytest.raises(BorrowError):
        cell.borrow_mut()
    first.release()
    with pytest.raises(BorrowError):
        cell.borrow_mut()
    second.release()
    with cell.borrow_mut() as guard:
        guard.value = [2]
    assert cell.into_inner() == [2]


def test_refcell_borrow_while_mut_fails():
    cell = RefCell(1)
    with cell.borrow_mut():
        with pytest.raises(BorrowError):
            cell.borrow()
        with pytest.raises(BorrowError):
            cell.borrow_mut()
    with cell.borrow() as ref:
        assert ref.value == 1


def test_ref_clone_counts_as_borrow():
    cell = RefCell("x")
    ref = cell.borrow()
    copy = ref.clone()
    ref.release()
    with pytest.raises(BorrowError):
        cell.borrow_mut()
    copy.release()
    assert cell.replace("y") == "x"


def test_release_twice_and_use_after_release():
    cell = RefCell(3)
    ref = cell.borrow()
    ref.release()
    with pytest.raises(BorrowError):
        ref.release()
    with pytest.raises(BorrowError):
        _ = ref.value
    guard = cell.borrow_mut()
    guard.release()
    with pytest.raises(BorrowError):
        guard.value = 4


def test_refcell_replace_while_borrowed_fails():
    cell = RefCell(1)
    with cell.borrow():
        with pytest.raises(BorrowError):
            cell.replace(2)
    assert cell.into_inner() == 1


def test_refcell_swap_and_take():
    a, b = RefCell([1]), RefCell([2])
    a.swap(b)
    assert (a.into_inner(), b.into_inner()) == ([2], [1])
    assert a.take() == [2]
    assert a.into_inner() == []


def test_refcell_swap_with_itself_fails():
    cell = RefCell(1)
    with pytest.raises(BorrowError):
        cell.swap(cell)
    with cell.borrow_mut() as guard:
        assert guard.value == 1