"""A FIFO queue of integers with a movable cursor."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Queue:
    """A first-in first-out queue with a cursor for out-of-order access."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()
        self._cursor: int | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items

    def push(self, key: int) -> None:
        """Append ``key`` at the back of the queue."""
        self._items.append(key)

    def pop(self) -> int:
        """Remove and return the key at the front of the queue."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        key = self._items.popleft()
        if self._cursor is not None:
            self._cursor = self._cursor - 1 if self._cursor > 0 else None
        return key

    def peek(self) -> int:
        """Return the key at the front without removing it."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def reset_cursor(self) -> None:
        """Point the cursor at the front of the queue."""
        self._cursor = 0 if self._items else None

    def advance_cursor(self) -> None:
        """Move the cursor to the next key; it stays put on the last key."""
        if self._cursor is None:
            raise IndexError("cursor is not set")
        if self._cursor + 1 < len(self._items):
            self._cursor += 1

    def current(self) -> int:
        """Return the key under the cursor."""
        if self._cursor is None:
            raise IndexError("cursor is not set")
        return self._items[self._cursor]

    def remove_current(self) -> int:
        """Remove and return the key under the cursor.

        Removing the front key moves the cursor to its successor; removing
        any other key moves it to the predecessor.
        """
        if self._cursor is None or not self._items:
            raise IndexError("cursor is not set")
        index = self._cursor
        key = self._items[index]
        del self._items[index]
        if index == 0:
            self._cursor = 0 if self._items else None
        else:
            self._cursor = index - 1
        return key