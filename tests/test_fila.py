import pytest

from rumormundo.fila import Queue


def _queue(*keys):
    q = Queue()
    for key in keys:
        q.push(key)
    return q


def test_fifo_order():
    q = _queue(3, 1, 2)
    assert len(q) == 3
    assert [q.pop(), q.pop(), q.pop()] == [3, 1, 2]
    assert q.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Queue().pop()


def test_peek_does_not_remove():
    q = _queue(8, 9)
    assert q.peek() == 8
    assert len(q) == 2


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_iter_front_to_back():
    assert list(_queue(4, 5, 6)) == [4, 5, 6]


def test_cursor_walks_and_stops_at_end():
    q = _queue(1, 2, 3)
    q.reset_cursor()
    assert q.current() == 1
    q.advance_cursor()
    assert q.current() == 2
    q.advance_cursor()
    q.advance_cursor()
    assert q.current() == 3


def test_cursor_unset_on_empty_queue():
    q = Queue()
    q.reset_cursor()
    with pytest.raises(IndexError):
        q.current()
    with pytest.raises(IndexError):
        q.advance_cursor()
    with pytest.raises(IndexError):
        q.remove_current()


def test_remove_current_front_moves_to_successor():
    q = _queue(1, 2, 3)
    q.reset_cursor()
    assert q.remove_current() == 1
    assert q.current() == 2
    assert list(q) == [2, 3]


def test_remove_current_middle_moves_to_predecessor():
    q = _queue(1, 2, 3)
    q.reset_cursor()
    q.advance_cursor()
    assert q.remove_current() == 2
    assert q.current() == 1
    assert list(q) == [1, 3]


def test_remove_current_last_moves_to_predecessor():
    q = _queue(1, 2, 3)
    q.reset_cursor()
    q.advance_cursor()
    q.advance_cursor()
    assert q.remove_current() == 3
    assert q.current() == 2
    assert list(q) == [1, 2]


def test_remove_only_element_clears_cursor():
    q = _queue(7)
    q.reset_cursor()
    assert q.remove_current() == 7
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.current()


def test_pop_keeps_cursor_on_same_key():
    q = _queue(1, 2, 3)
    q.reset_cursor()
    q.advance_cursor()
    q.pop()
    assert q.current() == 2