#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Final, Self

import numpy as NP
import rich.repr as RR

from .Capabilities import Capability, Traits
from .Cursors      import Cursor, BidirectionalCursor, RandomAccessCursor
from .Groups       import CursorGroup
from .Policies     import PropagationPolicy


__all__: list[str] = [
    'ForwardCompositeCursor', 'BidirectionalCompositeCursor',
    'RandomAccessCompositeCursor', 'composite_cursor_type',
]


#############################################################################
#  Composite Cursors
# -------------------
#
#  A composite cursor pairs a `CursorGroup` with a propagation policy.  It
#  moves in place (`inc`, `dec`, `advance`) and also honours the immutable
#  member cursor interface (`next`, `prev`, `jump`) by copying first, so a
#  combinator can itself be a member of another combinator.
#
class ForwardCompositeCursor(Cursor[Any]):
    __slots__ = ('group', 'policy', 'traits')
    group : CursorGroup
    policy: type[PropagationPolicy]
    traits: Traits

    def __init__(self: Self,
                 group : CursorGroup,
                 policy: type[PropagationPolicy],
                 traits: Traits
    ) -> None:
        self.group = group
        self.policy = policy
        self.traits = traits

    @property
    def capability(self: Self) -> Capability:  # type: ignore[override]
        return self.traits.capability

    @property
    def difference_type(self: Self) -> NP.dtype[Any]:  # type: ignore[override]
        return self.traits.difference_type

    def copy(self: Self) -> Self:
        return type(self)(self.group.copy(), self.policy, self.traits)

    __copy__ = copy

    def deref(self: Self) -> Any:
        return self.policy.deref(self.group)

    def inc(self: Self) -> Self:
        self.policy.step_forward(self.group)
        return self

    def next(self: Self) -> Self:
        return self.copy().inc()

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, ForwardCompositeCursor):
            return NotImplemented
        return self.policy.equal(self.group, other.group)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self: Self) -> str:
        return (f'{type(self).__name__}'
                f'({self.policy.name}, {self.group.current!r})')

    def __rich_repr__(self: Self) -> RR.Result:
        yield self.policy.name
        yield from self.group.current


class BidirectionalCompositeCursor(ForwardCompositeCursor,
                                   BidirectionalCursor[Any]):
    __slots__ = ()

    def dec(self: Self) -> Self:
        self.policy.step_backward(self.group)
        return self

    def prev(self: Self) -> Self:
        return self.copy().dec()


class RandomAccessCompositeCursor(BidirectionalCompositeCursor,
                                  RandomAccessCursor[Any]):
    __slots__ = ()

    def advance(self: Self, offset: int) -> Self:
        self.policy.jump(self.group, offset)
        return self

    def jump(self: Self, offset: int) -> Self:
        return self.copy().advance(offset)

    def distance(self: Self, other: Self) -> int:
        return self.policy.distance(self.group, other.group)

    def __iadd__(self: Self, offset: int) -> Self:
        return self.advance(offset)

    def __isub__(self: Self, offset: int) -> Self:
        return self.advance(-offset)

    def __add__(self: Self, offset: int) -> Self:
        return self.jump(offset)

    __radd__ = __add__

    def __sub__(self: Self, other: Self | int) -> Any:
        if isinstance(other, RandomAccessCompositeCursor):
            return self.distance(other)
        return self.jump(-other)

    def __getitem__(self: Self, offset: int) -> Any:
        return self.jump(offset).deref()


COMPOSITE_CURSOR_TYPES: Final[dict[Capability, type[ForwardCompositeCursor]]] = {
    Capability.FORWARD      : ForwardCompositeCursor,
    Capability.BIDIRECTIONAL: BidirectionalCompositeCursor,
    Capability.RANDOM_ACCESS: RandomAccessCompositeCursor,
}


def composite_cursor_type(traits: Traits) -> type[ForwardCompositeCursor]:
    return COMPOSITE_CURSOR_TYPES[traits.capability]
