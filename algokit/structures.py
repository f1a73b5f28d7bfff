"""Small container types: bounded and min-tracking stacks, adapters, grids, lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


class CustomStack:
    """Bounded stack whose bottom elements can be incremented in bulk."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full; a full stack ignores it."""
        if len(self._items) < self.max_size:
            self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top element, or -1 when empty."""
        return self._items.pop() if self._items else -1

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to each of the bottom ``k`` elements."""
        for i in range(min(k, len(self._items))):
            self._items[i] += val


class MinStack:
    """Stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def _top_entry(self) -> tuple[int, int]:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def push(self, val: int) -> None:
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        self._top_entry()
        self._items.pop()

    def top(self) -> int:
        return self._top_entry()[0]

    def get_min(self) -> int:
        return self._top_entry()[1]


class SubrectangleQueries:
    """Grid of values supporting rectangular overwrite and point lookup."""

    def __init__(self, rectangle: Sequence[Sequence[int]]) -> None:
        self._grid = [list(row) for row in rectangle]

    def update_subrectangle(
        self, row1: int, col1: int, row2: int, col2: int, new_value: int
    ) -> None:
        """Set every cell from (row1, col1) to (row2, col2) inclusive to ``new_value``."""
        for row in self._grid[row1 : row2 + 1]:
            row[col1 : col2 + 1] = [new_value] * (col2 - col1 + 1)

    def get_value(self, row: int, col: int) -> int:
        return self._grid[row][col]


class QueueStack:
    """Last-in first-out stack built from two queues."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, x: int) -> None:
        self._spare.append(x)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> int:
        if not self._main:
            raise IndexError("stack is empty")
        return self._main.popleft()

    def top(self) -> int:
        """The top element, or -1 when empty."""
        return self._main[0] if self._main else -1

    def empty(self) -> bool:
        return not self._main


class StackQueue:
    """First-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._main: list[int] = []
        self._spare: list[int] = []

    def push(self, x: int) -> None:
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(x)
        while self._spare:
            self._main.append(self._spare.pop())

    def _check(self) -> None:
        if not self._main:
            raise IndexError("queue is empty")

    def pop(self) -> int:
        self._check()
        return self._main.pop()

    def peek(self) -> int:
        self._check()
        return self._main[-1]

    def empty(self) -> bool:
        return not self._main


@dataclass
class ListNode:
    """Node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only the node itself (not the tail)."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = following.val
    node.next = following.next