from __future__ import annotations

import logging
from typing import Any, Container, Iterable, Iterator, Optional

from .cursor import cursor_for
from .merge import scan_merge
from .probe import scan_probe, supports_lookup
from .selection import choose_variant
from .trace import KEEP, DebugHook, ScanTally, run_scan, traced

logger = logging.getLogger(__name__)


def check_element_types(ac: object, bc: object) -> None:
    a_type = getattr(ac, "element_type", None)
    b_type = getattr(bc, "element_type", None)
    if a_type is not None and b_type is not None and a_type is not b_type:
        raise TypeError(
            f"the containers passed need to have the same element type "
            f"({a_type.__name__} vs {b_type.__name__})"
        )


def intersect_update_merge(
    ac: Iterable[Any],
    bc: Any,
    *,
    deferred: bool = True,
    debug_hook: Optional[DebugHook] = None,
) -> None:
    """Remove from ``bc`` every element missing from ``ac``.

    Both must be ascending. Time is proportional to ``len(ac) + len(bc)``.
    """
    check_element_types(ac, bc)
    cur = cursor_for(bc, deferred=deferred)
    try:
        tally = run_scan("merge", scan_merge(ac, cur), debug_hook)
    finally:
        cur.close()
    logger.debug("merge: kept %d, removed %d, skipped %d", tally.kept, tally.removed, tally.skipped)


def intersect_update_probe(
    ac: Container[Any],
    bc: Any,
    *,
    deferred: bool = True,
    debug_hook: Optional[DebugHook] = None,
) -> None:
    """Remove from ``bc`` every element missing from ``ac``, by lookup.

    Time is proportional to ``log(len(ac)) * len(bc)``, so this beats the merge
    when ``ac`` is large compared to ``bc``. ``ac`` must have a lookup
    structure (``OrderedSet``, ``OrderedMultiset``, ``set``, ...).
    """
    check_element_types(ac, bc)
    if not supports_lookup(ac):
        raise TypeError(
            f"{type(ac).__name__} has no lookup structure; "
            "wrap it in an OrderedSet or use the merge variant"
        )
    cur = cursor_for(bc, deferred=deferred)
    try:
        tally = run_scan("probe", scan_probe(ac, cur), debug_hook)
    finally:
        cur.close()
    logger.debug("probe: kept %d, removed %d", tally.kept, tally.removed)


def intersect_update(
    ac: Any,
    bc: Any,
    *,
    variant: str = "auto",
    deferred: bool = True,
    debug_hook: Optional[DebugHook] = None,
) -> None:
    if variant == "auto":
        variant = choose_variant(ac, bc)
    if variant == "merge":
        intersect_update_merge(ac, bc, deferred=deferred, debug_hook=debug_hook)
    elif variant == "probe":
        intersect_update_probe(ac, bc, deferred=deferred, debug_hook=debug_hook)
    else:
        raise ValueError(f'variant must be one of: "auto","merge","probe" (got {variant!r})')


def iter_intersect_update(
    ac: Iterable[Any],
    bc: Any,
    *,
    debug_hook: Optional[DebugHook] = None,
) -> Iterator[Any]:
    """Merge scan that yields each surviving element of ``bc`` as it is confirmed.

    Erasure is immediate, so whenever the generator is suspended ``bc`` holds
    the survivors so far followed by the unscanned tail. Dropping the generator
    early leaves that state; running any intersection again finishes the job.
    """
    check_element_types(ac, bc)
    cur = cursor_for(bc, deferred=False)
    tally = ScanTally()
    try:
        for action, value in traced("merge", scan_merge(ac, cur), tally, debug_hook):
            if action == KEEP:
                yield value
    finally:
        cur.close()
    logger.debug("resumable merge: kept %d, removed %d", tally.kept, tally.removed)
