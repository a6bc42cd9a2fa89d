from __future__ import annotations

from typing import Any, Iterable, Iterator

from .cursor import Cursor
from .trace import ERASE, KEEP, SKIP, TRUNCATE, Action

_END = object()


def scan_merge(ac: Iterable[Any], cur: Cursor[Any]) -> Iterator[tuple[Action, Any]]:
    """Two-pointer merge of ascending ``ac`` against the elements under ``cur``.

    Elements of ``bc`` missing from ``ac`` are erased through the cursor; the
    tail left once ``ac`` runs out is dropped in one step. ``ac`` is only
    advanced when it is strictly behind, so every duplicate in ``bc`` meets the
    same ``ac`` element, and duplicates in ``ac`` are harmless.

    Yields ``(action, value)`` for each decision. The cursor is not closed here.
    """
    it = iter(ac)
    a = next(it, _END)
    while a is not _END and not cur.at_end():
        b = cur.value
        # only __lt__ is required of the elements
        if a < b:
            yield SKIP, a
            a = next(it, _END)
        elif b < a:
            cur.erase()
            yield ERASE, b
        else:
            cur.advance()
            yield KEEP, b
    if not cur.at_end():
        yield TRUNCATE, cur.erase_rest()
