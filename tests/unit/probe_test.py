from pytest import mark, raises
from sorted_intersect import LinkedSequence, OrderedMultiset, OrderedSet, intersect_update_probe, supports_lookup


@mark.parametrize("make_ac", [OrderedSet, OrderedMultiset, set, frozenset])
@mark.parametrize("make_bc", [list, OrderedSet, OrderedMultiset, LinkedSequence])
@mark.parametrize(
    "ac, bc, expected",
    [
        ([2, 4, 6], [1, 2, 3, 4, 5], [2, 4]),
        ([], [1, 2, 3], []),
        ([1, 2, 3], [], []),
        ([1, 3, 5, 7, 9], [2, 4, 6, 8], []),
        ([1, 2, 3, 4], [2, 3], [2, 3]),
    ],
)
def test_scenarios(make_ac, make_bc, ac, bc, expected):
    target = make_bc(bc)
    intersect_update_probe(make_ac(ac), target)
    assert list(target) == expected


def test_duplicates_in_bc():
    target = [5, 5, 7, 10]
    intersect_update_probe(OrderedSet([5, 10]), target)
    assert target == [5, 5, 10]


def test_range_and_dict_as_ac():
    target = [1, 4, 9, 16]
    intersect_update_probe(range(0, 10), target)
    assert target == [1, 4, 9]
    target = [1, 4, 9, 16]
    intersect_update_probe({4: "a", 16: "b"}.keys(), target, deferred=False)
    assert target == [4, 16]


@mark.parametrize("ac", [[1, 2], (1, 2), LinkedSequence([1, 2])])
def test_linear_only_ac_rejected_before_touching_bc(ac):
    assert not supports_lookup(ac)
    target = [1, 2, 3]
    with raises(TypeError):
        intersect_update_probe(ac, target)
    assert target == [1, 2, 3]


def test_mismatched_element_types_rejected():
    with raises(TypeError):
        intersect_update_probe(OrderedSet([1.0], element_type=float), LinkedSequence([1], element_type=int))


def test_debug_hook():
    steps = []
    intersect_update_probe(OrderedSet([2]), [1, 2, 3], debug_hook=steps.append)
    assert [(s.action, s.value) for s in steps] == [("erase", 1), ("keep", 2), ("erase", 3)]
    assert {s.variant for s in steps} == {"probe"}


def test_range_ac_with_float_elements():
    assert supports_lookup(range(5))
    target = [0.5, 2.0, 3.0, 7.0]
    intersect_update_probe(range(5), target)
    assert target == [2.0, 3.0]
