from collections import deque
from itertools import product
from math import prod

from pytest import mark, raises

from pylazy.core import (
    Capability, CapabilityError, CartesianView, RandomAccessCompositeCursor,
    cartesian, cartesian_range, concat, cons, cons_cursors, cursors, forward,
)


def members(*lengths: int) -> list[tuple[str, ...]]:
    return [tuple(f'{chr(ord("a") + i)}{j}' for j in range(n))
            for i, n in enumerate(lengths)]


def count_steps(view) -> int:
    cursor, end = view.begin(), view.end()
    steps = 0
    while cursor != end:
        cursor.inc()
        steps += 1
    return steps


def test_odometer_ordering():
    a, b = members(2, 3)
    assert [('a0', 'b0'), ('a0', 'b1'), ('a0', 'b2'),
            ('a1', 'b0'), ('a1', 'b1'), ('a1', 'b2')] == list(cartesian(a, b))


@mark.parametrize('lengths', [
    (1,), (4,), (2, 3), (3, 1, 2), (1, 1, 1), (2, 2, 2, 2), (5, 0), (0, 3),
    (3, 0, 2), (0,),
])
def test_exhaustion_count(lengths):
    view = cartesian(*members(*lengths))
    assert prod(lengths) == count_steps(view)
    assert prod(lengths) == len(view)
    assert list(product(*members(*lengths))) == list(view)


def test_last_member_varies_fastest():
    view = cartesian(*members(2, 3, 2))
    cursor = view.begin()
    previous = cursor.group.current.copy()
    for _ in range(len(view) - 1):
        cursor.inc()
        current = cursor.group.current
        assert current[2] != previous[2]
        if current[1] != previous[1]:
            # members to the right just completed a full traversal
            assert current[2] == cursor.group.begin[2]
        previous = current.copy()


def test_empty_member_makes_empty_product():
    view = cartesian('ab', '', 'cd')
    assert view.empty()
    assert not view
    assert [] == list(view)
    assert 0 == len(view)
    assert view.begin() == view.end()


@mark.parametrize('lengths', [
    (2, 3), (3, 1, 2), (4,), (2, 2, 3), (0, 3), (3, 0, 2), (2, 0),
])
def test_step_and_jump_agree(lengths):
    view = cartesian(*members(*lengths))
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


@mark.parametrize('lengths', [
    (2, 3), (3, 1, 2), (1, 4, 2), (0, 3), (3, 0, 2), (2, 0),
])
def test_jump_symmetry(lengths):
    view = cartesian(*members(*lengths))
    total = len(view)
    for start in range(total + 1):
        origin = view.begin() + start
        for k in range(total - start + 1):
            assert origin == (origin + k) - k
        for k in range(start + 1):
            assert origin == (origin - k) + k


@mark.parametrize('lengths', [(0, 3), (3, 0, 2), (2, 0), (0,), (0, 0)])
def test_zero_jump_on_empty_product(lengths):
    view = cartesian(*members(*lengths))
    assert view.begin() + 0 == view.end()
    assert view.end() - 0 == view.begin()
    cursor = view.begin()
    cursor.advance(0)
    assert cursor == view.end()
    assert 0 == view.end() - view.begin()


def test_distance_consistency():
    view = cartesian(*members(3, 2, 4))
    begin = view.begin()
    for d in range(len(view) + 1):
        moved = view.begin() + d
        assert d == moved - begin
        assert -d == begin - moved
    assert len(view) == view.end() - view.begin()


def test_ordering_from_distance():
    view = cartesian(*members(2, 3))
    a, b = view.begin() + 1, view.begin() + 4
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert not b < a
    assert a <= view.begin() + 1


def test_step_backward_mirrors_forward():
    view = cartesian(*members(2, 3, 2))
    assert list(view)[::-1] == list(reversed(view))
    cursor = view.end()
    cursor.dec()
    assert ('a1', 'b2', 'c1') == cursor.deref()
    cursor.dec()
    assert ('a1', 'b2', 'c0') == cursor.deref()
    cursor.dec()
    assert ('a1', 'b1', 'c1') == cursor.deref()


def test_indexing_and_last():
    view = cartesian(*members(2, 3))
    assert ('a0', 'b0') == view[0]
    assert ('a1', 'b0') == view[3]
    assert ('a1', 'b2') == view[-1]
    assert ('a1', 'b2') == view.last()
    assert ('a0', 'b0') == view.first()
    with raises(IndexError):
        view[6]
    with raises(IndexError):
        view[-7]
    assert ('a1', 'b1') == view.begin()[4]


def test_negative_advance():
    view = cartesian(*members(2, 3))
    cursor = view.end()
    cursor.advance(-4)
    assert ('a0', 'b2') == cursor.deref()
    cursor += 2
    assert ('a1', 'b1') == cursor.deref()
    cursor -= 1
    assert ('a1', 'b0') == cursor.deref()


def test_independent_traversals():
    view = cartesian('ab', 'xy')
    first = iter(view)
    assert ('a', 'x') == next(first)
    assert [('a', 'x'), ('a', 'y'), ('b', 'x'), ('b', 'y')] == list(view)
    assert ('a', 'y') == next(first)
    cursor = view.begin()
    cursor.inc()
    assert ('a', 'x') == view.begin().deref()


def test_bidirectional_member_degrades():
    view = cartesian(deque([1, 2]), (3, 4))
    assert Capability.BIDIRECTIONAL == view.capability
    cursor = view.begin()
    assert not isinstance(cursor, RandomAccessCompositeCursor)
    assert hasattr(cursor, 'dec')
    assert not hasattr(cursor, 'advance')
    assert [(2, 4), (2, 3), (1, 4), (1, 3)] == list(reversed(view))
    assert 4 == len(view)
    assert (2, 4) == view.last()
    with raises(CapabilityError):
        view[0]


def test_forward_member_degrades():
    view = cartesian_range([cons_cursors(cons(1, 2)), cursors('xyz')])
    assert Capability.FORWARD == view.capability
    cursor = view.begin()
    assert not hasattr(cursor, 'dec')
    assert not hasattr(cursor, 'advance')
    assert not hasattr(cursor, 'distance')
    assert 6 == len(view)
    assert (2, 'z') == view.last()
    with raises(CapabilityError):
        reversed(view)
    with raises(CapabilityError):
        cartesian_range([cons_cursors(cons(1, 2)), cursors('xyz')],
                        require=Capability.BIDIRECTIONAL)


def test_forward_cursor_pairs():
    view = cartesian_range([forward('ab'), cursors((1, 2))])
    assert Capability.FORWARD == view.capability
    assert [('a', 1), ('a', 2), ('b', 1), ('b', 2)] == list(view)


def test_nested_combinators():
    view = cartesian(concat('ab', 'c'), (1, 2))
    assert Capability.RANDOM_ACCESS == view.capability
    assert [('a', 1), ('a', 2), ('b', 1),
            ('b', 2), ('c', 1), ('c', 2)] == list(view)
    assert ('c', 1) == view[4]
    assert 6 == len(view)
    assert list(view)[::-1] == list(reversed(view))


def test_difference_type_promotion():
    view = cartesian('ab', 'cd')
    assert 'int64' == str(view.traits.difference_type)


def test_rejects_bad_members():
    with raises(ValueError):
        cartesian()
    with raises(TypeError):
        cartesian(iter([1, 2]))
    with raises(TypeError):
        cartesian_range([('not', 'cursors')])
    with raises(TypeError):
        cartesian({1, 2})


def test_is_a_cartesian_view():
    assert isinstance(cartesian('a'), CartesianView)
    assert [('a',), ('b',)] == list(cartesian('ab'))
