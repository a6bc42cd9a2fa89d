from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


def _check_type(owner: Any, item: object) -> None:
    element_type = owner.element_type
    if element_type is not None and not isinstance(item, element_type):
        raise TypeError(
            f"{type(owner).__name__} holds {element_type.__name__} elements, "
            f"got {type(item).__name__}"
        )


class OrderedMultiset(Generic[T]):
    """Ordered sequence where duplicates are allowed.

    Elements are kept ascending in a plain list; lookups bisect, so membership
    is O(log n). Removal shifts the backing list.
    """

    _unique = False

    def __init__(self, items: Iterable[T] = (), *, element_type: Optional[type] = None):
        self.element_type = element_type
        values = sorted(items)
        for value in values:
            _check_type(self, value)
        if self._unique:
            values = [v for i, v in enumerate(values) if i == 0 or values[i - 1] < v]
        self._items: list[T] = values

    def add(self, item: T) -> None:
        _check_type(self, item)
        index = bisect_right(self._items, item)
        if self._unique and index and not (self._items[index - 1] < item):
            return
        self._items.insert(index, item)

    def remove(self, item: T) -> None:
        index = bisect_left(self._items, item)
        if index == len(self._items) or self._items[index] != item:
            raise ValueError("item not found in ordered sequence")
        del self._items[index]

    def discard(self, item: T) -> None:
        try:
            self.remove(item)
        except ValueError:
            pass

    def index(self, item: T) -> int:
        index = bisect_left(self._items, item)
        if index == len(self._items) or self._items[index] != item:
            raise ValueError(f"{item!r} is not in {type(self).__name__}")
        return index

    def count(self, item: T) -> int:
        return bisect_right(self._items, item) - bisect_left(self._items, item)

    def __contains__(self, item: object) -> bool:
        index = bisect_left(self._items, item)
        return index < len(self._items) and self._items[index] == item

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class OrderedSet(OrderedMultiset[T]):
    """Ordered sequence of unique elements; adding an existing value is a no-op."""

    _unique = True


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None):
        self.value = value
        self.prev: _Node[T] = self
        self.next: _Node[T] = self


class LinkedSequence(Generic[T]):
    """Sorted doubly linked list; duplicates allowed, O(1) unlink at a node.

    Membership is a linear walk, so this type is only usable as the target of a
    probe scan, never as its lookup side.
    """

    def __init__(self, items: Iterable[T] = (), *, element_type: Optional[type] = None):
        self.element_type = element_type
        # circular list, the sentinel marks both ends
        self._head: _Node[T] = _Node()
        self._size = 0
        for value in sorted(items):
            _check_type(self, value)
            self._link_before(self._head, value)

    def _link_before(self, node: _Node[T], value: T) -> None:
        new = _Node(value)
        new.prev = node.prev
        new.next = node
        node.prev.next = new
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node[T]) -> _Node[T]:
        assert node is not self._head
        nxt = node.next
        node.prev.next = nxt
        nxt.prev = node.prev
        node.prev = node.next = node
        self._size -= 1
        return nxt

    def add(self, item: T) -> None:
        _check_type(self, item)
        # walk back from the tail so appends in ascending order stay O(1)
        node = self._head.prev
        while node is not self._head and item < node.value:
            node = node.prev
        self._link_before(node.next, item)

    def remove(self, item: T) -> None:
        node = self._head.next
        while node is not self._head:
            if node.value == item:
                self._unlink(node)
                return
            node = node.next
        raise ValueError("item not found in linked sequence")

    def discard(self, item: T) -> None:
        try:
            self.remove(item)
        except ValueError:
            pass

    def clear(self) -> None:
        node = self._head.next
        while node is not self._head:
            node = self._unlink(node)

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedSequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedSequence({list(self)!r})"
