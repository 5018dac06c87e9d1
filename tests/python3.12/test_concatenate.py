from collections import deque

from pytest import mark, raises

from pylazy.core import (
    Capability, CapabilityError, ConcatenateView, cartesian, concat,
    concat_range, cons, cons_cursors, cursors, split,
)


def members(*lengths: int) -> list[tuple[str, ...]]:
    return [tuple(f'{chr(ord("a") + i)}{j}' for j in range(n))
            for i, n in enumerate(lengths)]


def flat(*lengths: int) -> list[str]:
    return [item for member in members(*lengths) for item in member]


def count_steps(view) -> int:
    cursor, end = view.begin(), view.end()
    steps = 0
    while cursor != end:
        cursor.inc()
        steps += 1
    return steps


LENGTHS = [
    (1,), (3,), (2, 3), (0, 2), (2, 0), (0, 0), (2, 0, 3), (0, 1, 0, 2, 0),
    (1, 1, 1), (0,),
]


def test_concatenation_ordering():
    assert ['x', 'y', 'p', 'q', 'r'] == list(concat(['x', 'y'], ['p', 'q', 'r']))


@mark.parametrize('lengths', LENGTHS)
def test_exhaustion_count(lengths):
    view = concat(*members(*lengths))
    assert sum(lengths) == count_steps(view)
    assert sum(lengths) == len(view)
    assert flat(*lengths) == list(view)
    assert flat(*lengths)[::-1] == list(reversed(view))


@mark.parametrize('lengths', LENGTHS)
def test_step_and_jump_agree(lengths):
    view = concat(*members(*lengths))
    total = len(view)
    for start in range(total + 1):
        for k in range(total - start + 1):
            stepped = view.begin() + start
            for _ in range(k):
                stepped.inc()
            jumped = view.begin() + start + k
            assert stepped == jumped
            if start + k < total:
                assert stepped.deref() == jumped.deref()


@mark.parametrize('lengths', LENGTHS)
def test_jump_symmetry(lengths):
    view = concat(*members(*lengths))
    total = len(view)
    for start in range(total + 1):
        origin = view.begin() + start
        for k in range(total - start + 1):
            assert origin == (origin + k) - k
        for k in range(start + 1):
            assert origin == (origin - k) + k


@mark.parametrize('lengths', LENGTHS)
def test_step_backward_and_jump_backward_agree(lengths):
    view = concat(*members(*lengths))
    total = len(view)
    for k in range(total + 1):
        stepped = view.end()
        for _ in range(k):
            stepped.dec()
        assert stepped == view.end() - k
        assert total - k == stepped - view.begin()


def test_distance_consistency():
    view = concat(*members(2, 0, 3, 1))
    begin = view.begin()
    for d in range(len(view) + 1):
        moved = view.begin() + d
        assert d == moved - begin
        assert -d == begin - moved


def test_exhausted_members_stay_at_end():
    view = concat(*members(2, 3))
    cursor = view.begin()
    cursor.inc().inc()
    group = cursor.group
    assert group.exhausted(0)
    assert 'b0' == cursor.deref()
    for _ in range(3):
        cursor.inc()
        assert group.current[0] == group.end[0]


def test_indexing():
    view = concat('xy', 'pqr')
    assert 'x' == view[0]
    assert 'p' == view[2]
    assert 'r' == view[-1]
    assert 'r' == view.last()
    assert 'x' == view.first()
    with raises(IndexError):
        view[5]


def test_empty():
    view = concat('', ())
    assert view.empty()
    assert [] == list(view)
    with raises(ValueError):
        view.first()
    assert None is view.first(None)
    assert 'nothing' == view.last('nothing')


def test_mixed_capabilities():
    view = concat_range([cursors('ab'), cons_cursors(cons('c', 'd'))])
    assert Capability.FORWARD == view.capability
    assert ['a', 'b', 'c', 'd'] == list(view)
    assert 4 == len(view)
    assert 'd' == view.last()
    assert not hasattr(view.begin(), 'dec')
    with raises(CapabilityError):
        view[1]
    with raises(CapabilityError):
        concat('ab', deque('cd'), require=Capability.RANDOM_ACCESS)
    both = concat('ab', deque('cd'))
    assert Capability.BIDIRECTIONAL == both.capability
    assert ['d', 'c', 'b', 'a'] == list(reversed(both))


def test_split_members():
    view = concat(split('a,b', ','), split('c', ','))
    assert Capability.FORWARD == view.capability
    assert ['a', 'b', 'c'] == list(view)


def test_concat_of_products():
    view = concat(cartesian('ab', '1'), [('z', 'z')])
    assert [('a', '1'), ('b', '1'), ('z', 'z')] == list(view)
    assert ('z', 'z') == view[2]
    assert 3 == len(view)


def test_rejects_empty():
    with raises(ValueError):
        concat()
    assert isinstance(concat('a'), ConcatenateView)
