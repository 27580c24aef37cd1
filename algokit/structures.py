"""Small container types: LRU cache, min-stack, two-stack queue, stock spanner."""

from __future__ import annotations

from collections import OrderedDict


class LRUCache:
    """A fixed-capacity key-value cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the least recently used key if full."""
        if key in self._items:
            del self._items[key]
        elif len(self._items) == self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def __len__(self) -> int:
        return len(self._items)


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        current_min = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, current_min))

    def pop(self) -> None:
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]

    def __len__(self) -> int:
        return len(self._entries)


class MyQueue:
    """A first-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        self._inbox.append(x)

    def pop(self) -> int:
        self._shift()
        return self._outbox.pop()

    def peek(self) -> int:
        self._shift()
        return self._outbox[-1]

    def empty(self) -> bool:
        return not self._inbox and not self._outbox


class StockSpanner:
    """Reports, for each new price, how many consecutive days it has been the high."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span