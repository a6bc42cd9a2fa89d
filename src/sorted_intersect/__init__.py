from .api import intersect_update, intersect_update_merge, intersect_update_probe, iter_intersect_update
from .containers import LinkedSequence, OrderedMultiset, OrderedSet
from .cursor import cursor_for
from .probe import supports_lookup
from .selection import choose_variant
from .trace import DebugHook, ScanStep

__all__ = [
    "intersect_update",
    "intersect_update_merge",
    "intersect_update_probe",
    "iter_intersect_update",
    "choose_variant",
    "OrderedSet",
    "OrderedMultiset",
    "LinkedSequence",
    "ScanStep",
    "DebugHook",
    "cursor_for",
    "supports_lookup",
]
