import random

import pytest

from rumormundo.conjunto import BoundedSet, SetFullError


def test_add_reports_new_and_duplicate():
    s = BoundedSet(3)
    assert s.add(5) is True
    assert s.add(5) is False
    assert len(s) == 1
    assert 5 in s


def test_add_beyond_capacity_raises():
    s = BoundedSet(2, [1, 2])
    with pytest.raises(SetFullError):
        s.add(3)
    assert list(s) == [1, 2]


def test_constructor_overfull_raises():
    with pytest.raises(SetFullError):
        BoundedSet(1, [1, 2])


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedSet(-1)


def test_is_empty():
    s = BoundedSet(2)
    assert s.is_empty()
    s.add(4)
    assert not s.is_empty()


def test_discard_keeps_order():
    s = BoundedSet(5, [1, 2, 3, 4])
    assert s.discard(2) is True
    assert s.discard(2) is False
    assert list(s) == [1, 3, 4]


def test_issubset():
    small = BoundedSet(2, [1, 3])
    big = BoundedSet(4, [1, 2, 3, 4])
    assert small.issubset(big)
    assert not big.issubset(small)
    assert BoundedSet(0).issubset(small)


def test_equality_ignores_order_and_capacity():
    assert BoundedSet(3, [1, 2, 3]) == BoundedSet(10, [3, 2, 1])
    assert not BoundedSet(3, [1, 2, 3]) == BoundedSet(3, [1, 2])
    assert not BoundedSet(2, [1, 2]) == BoundedSet(3, [1, 2, 3])


def test_difference_sized_to_result():
    a = BoundedSet(5, [1, 2, 3, 4])
    b = BoundedSet(5, [2, 4, 6])
    d = a.difference(b)
    assert list(d) == [1, 3]
    assert d.capacity == len(d)


def test_intersection_sized_to_result():
    a = BoundedSet(5, [1, 2, 3, 4])
    b = BoundedSet(5, [4, 2, 6])
    i = a.intersection(b)
    assert list(i) == [2, 4]
    assert i.capacity == len(i)


def test_union_sized_to_result():
    a = BoundedSet(5, [1, 2, 3])
    b = BoundedSet(5, [3, 4])
    u = a.union(b)
    assert list(u) == [1, 2, 3, 4]
    assert u.capacity == len(u)


def test_copy_is_independent():
    a = BoundedSet(6, [1, 2])
    c = a.copy()
    c.add(9)
    assert list(a) == [1, 2]
    assert c.capacity == a.capacity
    assert 9 in c


def test_random_subset_of_empty_set():
    sub = BoundedSet(4).random_subset(3, random.Random(0))
    assert len(sub) == 0
    assert sub.capacity == 0


def test_random_subset_larger_than_set_copies():
    s = BoundedSet(10, [7, 8, 9])
    sub = s.random_subset(5, random.Random(0))
    assert list(sub) == [7, 8, 9]
    assert sub.capacity == len(s)


@pytest.mark.parametrize("n", [0, 1, 3, 5])
def test_random_subset_size_and_membership(n):
    s = BoundedSet(5, [10, 20, 30, 40, 50])
    sub = s.random_subset(n, random.Random(42))
    assert len(sub) == n
    assert sub.issubset(s)


def test_random_subset_deterministic_with_seed():
    s = BoundedSet(6, [1, 2, 3, 4, 5, 6])
    first = list(s.random_subset(3, random.Random(7)))
    second = list(s.random_subset(3, random.Random(7)))
    assert first == second


def test_random_subset_negative_rejected():
    with pytest.raises(ValueError):
        BoundedSet(2, [1]).random_subset(-1, random.Random(0))


def test_str_is_sorted_and_does_not_reorder():
    s = BoundedSet(3, [3, 1, 2])
    assert str(s) == "{ 1 2 3 }"
    assert list(s) == [3, 1, 2]


def test_str_empty():
    assert str(BoundedSet(0)) == "{ }"


def test_grow_doubles_capacity_and_allows_add():
    s = BoundedSet(2, [1, 2])
    s.grow()
    assert s.capacity == 4
    assert s.add(3) is True


def test_grow_zero_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedSet(0).grow()


def test_remove_random():
    s = BoundedSet(4, [1, 2, 3, 4])
    removed = s.remove_random(random.Random(3))
    assert removed not in s
    assert removed in {1, 2, 3, 4}
    assert len(s) == 3


def test_remove_random_empty_raises():
    with pytest.raises(KeyError):
        BoundedSet(1).remove_random(random.Random(0))