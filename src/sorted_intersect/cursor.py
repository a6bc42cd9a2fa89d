from __future__ import annotations

from functools import singledispatch
from typing import Any, Generic, Protocol, TypeVar

from .containers import LinkedSequence, OrderedMultiset, _Node

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Cursor(Protocol[T_co]):
    """Forward cursor over a mutable ascending container.

    ``erase`` removes the current element and leaves the cursor on the next
    remaining one, so a scan never skips or revisits an element.
    """

    def at_end(self) -> bool: ...

    @property
    def value(self) -> T_co: ...

    def advance(self) -> None: ...

    def erase(self) -> None: ...

    def erase_rest(self) -> int: ...

    def close(self) -> None: ...


class ListCursor(Generic[T]):
    """Index cursor that erases immediately; the list is consistent after every call."""

    __slots__ = ("_items", "_pos")

    def __init__(self, items: list[T]):
        self._items = items
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._items)

    @property
    def value(self) -> T:
        return self._items[self._pos]

    def advance(self) -> None:
        if self.at_end():
            raise IndexError("cursor advanced past the end")
        self._pos += 1

    def erase(self) -> None:
        if self.at_end():
            raise IndexError("cursor erase past the end")
        del self._items[self._pos]

    def erase_rest(self) -> int:
        n = len(self._items) - self._pos
        del self._items[self._pos:]
        return n

    def close(self) -> None:
        pass


class CompactingCursor(Generic[T]):
    """Index cursor that defers removal to a single truncation.

    Kept elements are swapped down to the write slot, so erased ones collect
    between the write and read positions. ``close`` drops that gap in one
    ``del``. Until then the list holds erased values in the gap; survivors and
    the unscanned tail keep their order.
    """

    __slots__ = ("_items", "_read", "_write", "_end")

    def __init__(self, items: list[T]):
        self._items = items
        self._read = 0
        self._write = 0
        self._end = len(items)

    def at_end(self) -> bool:
        return self._read >= self._end

    @property
    def value(self) -> T:
        if self._read >= self._end:
            raise IndexError("cursor is past the end")
        return self._items[self._read]

    def advance(self) -> None:
        r, w = self._read, self._write
        if r >= self._end:
            raise IndexError("cursor advanced past the end")
        if r != w:
            self._items[w], self._items[r] = self._items[r], self._items[w]
        self._read = r + 1
        self._write = w + 1

    def erase(self) -> None:
        if self._read >= self._end:
            raise IndexError("cursor erase past the end")
        self._read += 1

    def erase_rest(self) -> int:
        n = self._end - self._read
        self._read = self._end
        return n

    def close(self) -> None:
        gap = self._read - self._write
        if gap:
            del self._items[self._write:self._read]
            self._end -= gap
            self._read = self._write


class LinkedCursor(Generic[T]):
    __slots__ = ("_seq", "_node")

    def __init__(self, seq: LinkedSequence[T]):
        self._seq = seq
        self._node: _Node[T] = seq._head.next

    def at_end(self) -> bool:
        return self._node is self._seq._head

    @property
    def value(self) -> T:
        if self.at_end():
            raise IndexError("cursor is past the end")
        return self._node.value

    def advance(self) -> None:
        if self.at_end():
            raise IndexError("cursor advanced past the end")
        self._node = self._node.next

    def erase(self) -> None:
        if self.at_end():
            raise IndexError("cursor erase past the end")
        self._node = self._seq._unlink(self._node)

    def erase_rest(self) -> int:
        n = 0
        while not self.at_end():
            self._node = self._seq._unlink(self._node)
            n += 1
        return n

    def close(self) -> None:
        pass


@singledispatch
def cursor_for(container: Any, *, deferred: bool = True) -> Cursor[Any]:
    """Return a cursor positioned at the first element of ``container``.

    With ``deferred`` set, list-backed containers compact on ``close()``
    instead of erasing element by element.
    """
    raise TypeError(f"cannot remove elements in place from {type(container).__name__}")


@cursor_for.register(list)
def _list_cursor(container: list, *, deferred: bool = True) -> Cursor[Any]:
    if deferred:
        return CompactingCursor(container)
    return ListCursor(container)


@cursor_for.register(OrderedMultiset)
def _ordered_cursor(container: OrderedMultiset, *, deferred: bool = True) -> Cursor[Any]:
    # erasing from a sorted store keeps it sorted and unique
    return _list_cursor(container._items, deferred=deferred)


@cursor_for.register(LinkedSequence)
def _linked_cursor(container: LinkedSequence, *, deferred: bool = True) -> Cursor[Any]:
    return LinkedCursor(container)
