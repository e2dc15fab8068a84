"""A set of integers with a fixed capacity and a stable insertion order."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator


class SetFullError(Exception):
    """Raised when an element is added to a set that has no room left."""


class BoundedSet:
    """An insertion-ordered set of integers that holds at most ``capacity`` elements."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, capacity: int, elements: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedSet):
            return NotImplemented
        return len(self) == len(other) and self.issubset(other)

    def __str__(self) -> str:
        body = "".join(f"{element} " for element in sorted(self._items))
        return "{ " + body + "}"

    def __repr__(self) -> str:
        return f"BoundedSet({self.capacity}, {self._items!r})"

    def is_empty(self) -> bool:
        """Return True when the set holds no elements."""
        return not self._items

    def add(self, element: int) -> bool:
        """Add ``element``; return False if it was already present.

        Raises SetFullError when the set is at capacity.
        """
        if element in self._items:
            return False
        if len(self._items) >= self.capacity:
            raise SetFullError(
                f"cannot add {element}: set is full ({self.capacity} elements)"
            )
        self._items.append(element)
        return True

    def discard(self, element: int) -> bool:
        """Remove ``element`` if present; return whether it was removed."""
        try:
            self._items.remove(element)
        except ValueError:
            return False
        return True

    def issubset(self, other: BoundedSet) -> bool:
        """Return True when every element of this set is in ``other``."""
        return all(element in other for element in self._items)

    def difference(self, other: BoundedSet) -> BoundedSet:
        """Elements of this set not in ``other``, in a set sized to fit."""
        kept = [element for element in self._items if element not in other]
        return BoundedSet(len(kept), kept)

    def intersection(self, other: BoundedSet) -> BoundedSet:
        """Elements present in both sets, in a set sized to fit."""
        kept = [element for element in self._items if element in other]
        return BoundedSet(len(kept), kept)

    def union(self, other: BoundedSet) -> BoundedSet:
        """Elements of either set, this set's first, in a set sized to fit."""
        shared = sum(1 for element in self._items if element in other)
        result = BoundedSet(len(self) + len(other) - shared, self._items)
        for element in other:
            result.add(element)
        return result

    def copy(self) -> BoundedSet:
        """Return an independent copy with the same capacity."""
        return BoundedSet(self.capacity, self._items)

    def random_subset(self, n: int, rng: random.Random) -> BoundedSet:
        """Return a subset of ``n`` randomly drawn elements.

        An empty set yields an empty subset; when ``n`` exceeds the size of
        the set, a copy sized to the set is returned.
        """
        if n < 0:
            raise ValueError(f"subset size must not be negative, got {n}")
        if not self._items:
            return BoundedSet(0)
        if n > len(self._items):
            return BoundedSet(len(self._items), self._items)
        subset = BoundedSet(n)
        while len(subset) < n:
            subset.add(self._items[rng.randrange(len(self._items))])
        return subset

    def grow(self) -> None:
        """Double the capacity; a set of capacity zero cannot grow."""
        if self.capacity < 1:
            raise ValueError("cannot grow a set with zero capacity")
        self.capacity *= 2

    def remove_random(self, rng: random.Random) -> int:
        """Remove and return a randomly chosen element."""
        if not self._items:
            raise KeyError("remove_random from an empty set")
        return self._items.pop(rng.randrange(len(self._items)))