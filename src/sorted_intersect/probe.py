from __future__ import annotations

from collections.abc import KeysView
from typing import Any, Container, Iterator

from .containers import OrderedMultiset
from .cursor import Cursor
from .trace import ERASE, KEEP, Action

# types whose ``in`` is O(log n) or better
LOOKUP_TYPES: tuple[type, ...] = (OrderedMultiset, set, frozenset, dict, KeysView, range)


def supports_lookup(ac: object) -> bool:
    """True when ``x in ac`` is sublinear.

    ``range`` only qualifies for int elements; ``2.0 in range(5)`` walks the range.
    """
    return isinstance(ac, LOOKUP_TYPES)


def scan_probe(ac: Container[Any], cur: Cursor[Any]) -> Iterator[tuple[Action, Any]]:
    """Test each element under ``cur`` for membership in ``ac``, erasing misses.

    Yields ``(action, value)`` for each element. The cursor is not closed here.
    """
    while not cur.at_end():
        b = cur.value
        if b in ac:
            cur.advance()
            yield KEEP, b
        else:
            cur.erase()
            yield ERASE, b
