from itertools import islice

from pytest import mark, raises
from sorted_intersect import (
    LinkedSequence,
    OrderedSet,
    intersect_update_merge,
    iter_intersect_update,
)


@mark.parametrize("make", [list, OrderedSet, LinkedSequence])
def test_exhausting_matches_merge(make):
    ac = OrderedSet([2, 3, 5, 7, 11])
    target = make(range(12))
    survivors = list(iter_intersect_update(ac, target))
    assert survivors == [2, 3, 5, 7, 11]
    assert list(target) == survivors


def test_paused_scan_leaves_consistent_state():
    ac = [2, 4, 6, 8]
    target = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    gen = iter_intersect_update(ac, target)
    assert list(islice(gen, 2)) == [2, 4]
    # survivors so far, then the untouched tail
    assert target == [2, 4, 5, 6, 7, 8, 9]
    gen.close()
    assert target == [2, 4, 5, 6, 7, 8, 9]
    intersect_update_merge(ac, target)
    assert target == [2, 4, 6, 8]


def test_duplicates_yielded_per_occurrence():
    target = [5, 5, 7, 10]
    assert list(iter_intersect_update(OrderedSet([5, 10]), target)) == [5, 5, 10]
    assert target == [5, 5, 10]


def test_errors_surface_on_first_step():
    gen = iter_intersect_update([1], (1,))
    with raises(TypeError):
        next(gen)


def test_hook_receives_truncate():
    steps = []
    target = [1, 2, 3]
    list(iter_intersect_update([1], target, debug_hook=steps.append))
    assert [(s.action, s.value) for s in steps] == [("keep", 1), ("skip", 1), ("truncate", 2)]


def test_hook_and_tally_match_plain_merge(caplog):
    ac = [2, 4, 6]
    plain, resumed = [], []
    intersect_update_merge(ac, [1, 2, 3, 4, 5, 9], debug_hook=plain.append)
    with caplog.at_level("DEBUG", logger="sorted_intersect.api"):
        list(iter_intersect_update(ac, [1, 2, 3, 4, 5, 9], debug_hook=resumed.append))
    assert resumed == plain
    assert "resumable merge: kept 2, removed 4" in caplog.text
