from pytest import mark, raises

from rich.pretty import pretty_repr

from pylazy import *

pytestmark = mark.smoke

def test_cons():
    assert () == cons()
    assert (1, (2, (3, ()))) == cons(1, 2, 3)
    assert (1, (2, (3, ()))) == cons_from_iterable([1, 2, 3])
    assert [1, 2, 3] == list(cons_to_iterable(cons(1, 2, 3)))
    assert [] == list(cons_to_iterable(()))
    assert 3 == cons_len(cons(1, 2, 3))
    assert 0 == cons_len(())

def test_cons_cursors():
    begin, end = cons_cursors(cons('a', 'b'))
    assert begin != end
    assert 'a' == begin.deref()
    assert 'b' == begin.next().deref()
    assert end == begin.next().next()
    assert Capability.FORWARD == begin.capability
    empty_begin, empty_end = cons_cursors(())
    assert empty_begin == empty_end

def test_index_cursors():
    begin, end = cursors('abc')
    assert isinstance(begin, IndexCursor)
    assert 3 == end - begin
    assert -3 == begin - end
    assert begin < end
    assert 'c' == begin.jump(2).deref()
    assert 'b' == end.prev().prev().deref()
    assert begin == end.jump(-3)

def test_cartesian():
    assert [('a', 1), ('a', 2), ('b', 1), ('b', 2)] == list(
        cartesian('ab', (1, 2)))
    assert 4 == len(cartesian('ab', (1, 2)))
    assert [] == list(cartesian('ab', ()))

def test_concat():
    assert ['x', 'y', 'p', 'q', 'r'] == list(concat('xy', 'pqr'))
    assert 5 == len(concat('xy', 'pqr'))
    assert [] == list(concat('', ()))

def test_split():
    assert ['a', '', 'b'] == list(split('a,,b,', ','))
    assert ['one', 'two'] == list(split('one two'))

def test_random():
    view = random(1, 6, 20, seed=7)
    assert 20 == len(view)
    assert all(1 <= x <= 6 for x in view)

def test_capabilities():
    assert Capability.FORWARD == weakest(
        Capability.RANDOM_ACCESS, Capability.FORWARD)
    with raises(CapabilityError):
        cartesian_range([cursors('ab'), cons_cursors(cons(1, 2))],
                        require=Capability.RANDOM_ACCESS)

def test_reprs():
    assert "ConcatenateView(['x', 'y', 'p', 'q', 'r'])" == repr(
        concat('xy', 'pqr'))
    assert "SplitView(['a', 'b'])" == repr(split('a b'))
    assert 'RANDOM_ACCESS' in pretty_repr(cartesian('ab', 'cd'))
