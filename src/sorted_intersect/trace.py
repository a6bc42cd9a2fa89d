from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Literal, Optional

Action = Literal["skip", "keep", "erase", "truncate"]

SKIP: Action = "skip"
KEEP: Action = "keep"
ERASE: Action = "erase"
TRUNCATE: Action = "truncate"


@dataclass(frozen=True, slots=True)
class ScanStep:
    """One decision of a scan.

    ``value`` is the element the decision was about. For ``"skip"`` it is the
    ``ac`` element passed over, for ``"truncate"`` it is the number of trailing
    ``bc`` elements dropped at once.
    """

    step: int
    variant: str
    action: Action
    value: Any


DebugHook = Callable[[ScanStep], None]


@dataclass(slots=True)
class ScanTally:
    kept: int = 0
    removed: int = 0
    skipped: int = 0


def traced(
    variant: str,
    steps: Iterable[tuple[Action, Any]],
    tally: ScanTally,
    debug_hook: Optional[DebugHook] = None,
) -> Iterator[tuple[Action, Any]]:
    """Re-yield each step after counting it into ``tally`` and passing it to the hook."""
    step = 0
    for action, value in steps:
        step += 1
        if action == KEEP:
            tally.kept += 1
        elif action == ERASE:
            tally.removed += 1
        elif action == TRUNCATE:
            tally.removed += value
        else:
            tally.skipped += 1
        if debug_hook is not None:
            debug_hook(ScanStep(step=step, variant=variant, action=action, value=value))
        yield action, value


def run_scan(
    variant: str,
    steps: Iterable[tuple[Action, Any]],
    debug_hook: Optional[DebugHook] = None,
) -> ScanTally:
    tally = ScanTally()
    for _ in traced(variant, steps, tally, debug_hook):
        pass
    return tally
