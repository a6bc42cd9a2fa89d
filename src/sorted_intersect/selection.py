from __future__ import annotations

import logging
import math
from collections.abc import Sized
from typing import Literal

from .containers import OrderedMultiset
from .probe import supports_lookup

logger = logging.getLogger(__name__)

Variant = Literal["merge", "probe"]

# one probe (bisect + compare) is costed at this many merge steps
PROBE_COST_FACTOR = 2.0


def probe_cost(len_ac: int, len_bc: int, factor: float = PROBE_COST_FACTOR) -> float:
    depth = math.log2(len_ac) if len_ac > 1 else 1.0
    return len_bc * depth * factor


def merge_cost(len_ac: int, len_bc: int) -> float:
    return float(len_ac + len_bc)


def iterates_ascending(ac: object) -> bool:
    if isinstance(ac, OrderedMultiset):
        return True
    return isinstance(ac, range) and ac.step > 0


def choose_variant(ac: object, bc: object, factor: float = PROBE_COST_FACTOR) -> Variant:
    """Pick the cheaper scan for this pair of containers.

    Falls back to merge whenever ``ac`` has no lookup structure or either size
    is unknown. Lookup types that do not iterate in ascending order (hash sets,
    dicts, descending ranges) always probe, since a merge would walk them out of
    order.
    """
    if not supports_lookup(ac):
        logger.debug("no lookup structure on %s, using merge", type(ac).__name__)
        return "merge"
    if not iterates_ascending(ac):
        logger.debug("%s does not iterate ascending, using probe", type(ac).__name__)
        return "probe"
    if not (isinstance(ac, Sized) and isinstance(bc, Sized)):
        return "merge"
    len_ac, len_bc = len(ac), len(bc)
    probe = probe_cost(len_ac, len_bc, factor)
    merge = merge_cost(len_ac, len_bc)
    variant: Variant = "probe" if probe < merge else "merge"
    logger.debug("|ac|=%d |bc|=%d probe=%.1f merge=%.1f -> %s", len_ac, len_bc, probe, merge, variant)
    return variant
