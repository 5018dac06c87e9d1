#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from abc import ABC, abstractmethod
from collections import abc as AB, deque
from typing import (Any, ClassVar, Protocol, Self, Sequence,
                    runtime_checkable)

import numpy as NP
import rich.repr as RR

from .Capabilities import Capability, DEFAULT_DIFFERENCE_TYPE


__all__: list[str] = [
    'Cursor', 'BidirectionalCursor', 'RandomAccessCursor', 'CursorRange',
    'IndexCursor', 'StepCursor', 'ForwardIndexCursor',
    'cursors', 'forward', 'bidirectional',
]


#############################################################################
#  Cursor Capability Hierarchy
# -----------------------------
#
#  Member cursors are immutable values: stepping returns a new cursor, so
#  a copy never affects the position of another.
#
class Cursor[T](ABC):
    """Forward cursor: `deref()`, `next()`, equality."""
    __slots__ = ()
    capability     : ClassVar[Capability]    = Capability.FORWARD
    difference_type: ClassVar[NP.dtype[Any]] = DEFAULT_DIFFERENCE_TYPE

    @abstractmethod
    def deref(self: Self) -> T:
        raise NotImplementedError

    @abstractmethod
    def next(self: Self) -> Self:
        raise NotImplementedError

    @abstractmethod
    def __eq__(self: Self, other: object) -> bool:
        raise NotImplementedError

    def copy(self: Self) -> Self:
        return self


class BidirectionalCursor[T](Cursor[T]):
    __slots__ = ()
    capability: ClassVar[Capability] = Capability.BIDIRECTIONAL

    @abstractmethod
    def prev(self: Self) -> Self:
        raise NotImplementedError


class RandomAccessCursor[T](BidirectionalCursor[T]):
    __slots__ = ()
    capability: ClassVar[Capability] = Capability.RANDOM_ACCESS

    @abstractmethod
    def jump(self: Self, offset: int) -> Self:
        raise NotImplementedError

    @abstractmethod
    def distance(self: Self, other: Self) -> int:
        """Signed number of forward steps from `other` to `self`."""
        raise NotImplementedError

    def next(self: Self) -> Self:
        return self.jump(1)

    def prev(self: Self) -> Self:
        return self.jump(-1)

    def __sub__(self: Self, other: Self) -> int:
        return self.distance(other)

    def __lt__(self: Self, other: Self) -> bool:
        return self.distance(other) < 0

    def __le__(self: Self, other: Self) -> bool:
        return self.distance(other) <= 0

    def __gt__(self: Self, other: Self) -> bool:
        return self.distance(other) > 0

    def __ge__(self: Self, other: Self) -> bool:
        return self.distance(other) >= 0


@runtime_checkable
class CursorRange(Protocol):
    """Anything handing out a begin/end cursor pair, views included."""
    def begin(self: Self) -> Cursor[Any]:
        raise NotImplementedError

    def end(self: Self) -> Cursor[Any]:
        raise NotImplementedError


#############################################################################
#  Sequence Cursors
# ------------------
#
class IndexedMixin[T]:
    __slots__ = ('seq', 'index')
    seq  : Sequence[T]
    index: int

    def __init__(self: Self, seq: Sequence[T], index: int = 0) -> None:
        self.seq = seq
        self.index = index

    def deref(self: Self) -> T:
        return self.seq[self.index]

    def __eq__(self: Self, other: object) -> bool:
        return (type(other) is type(self)
                and self.seq is other.seq         # type: ignore
                and self.index == other.index)    # type: ignore

    def __hash__(self: Self) -> int:
        return hash((id(self.seq), self.index))

    def __repr__(self: Self) -> str:
        return f'{type(self).__name__}({self.index})'

    def __rich_repr__(self: Self) -> RR.Result:
        yield self.index


class IndexCursor[T](IndexedMixin[T], RandomAccessCursor[T]):
    """Random-access cursor over a `Sequence`."""
    __slots__ = ()

    def jump(self: Self, offset: int) -> Self:
        return type(self)(self.seq, self.index + offset)

    def distance(self: Self, other: Self) -> int:
        return self.index - other.index


class StepCursor[T](IndexedMixin[T], BidirectionalCursor[T]):
    """Bidirectional cursor, for sequences with costly random access."""
    __slots__ = ()

    def next(self: Self) -> Self:
        return type(self)(self.seq, self.index + 1)

    def prev(self: Self) -> Self:
        return type(self)(self.seq, self.index - 1)


class ForwardIndexCursor[T](IndexedMixin[T], Cursor[T]):
    __slots__ = ()

    def next(self: Self) -> Self:
        return type(self)(self.seq, self.index + 1)


def forward[T](seq: Sequence[T]) -> tuple[Cursor[T], Cursor[T]]:
    """Forward-only cursor pair over `seq`."""
    return ForwardIndexCursor(seq, 0), ForwardIndexCursor(seq, len(seq))


def bidirectional[T](seq: Sequence[T]
                     ) -> tuple[BidirectionalCursor[T], BidirectionalCursor[T]]:
    """Bidirectional cursor pair over `seq`."""
    return StepCursor(seq, 0), StepCursor(seq, len(seq))


def cursors(obj: Any) -> tuple[Cursor[Any], Cursor[Any]]:
    """Begin/end cursor pair for `obj`.

    Views and other `CursorRange`s hand out their own cursors, a `deque`
    steps (its random access is linear), any other `Sequence` is indexed.
    One-shot iterators are rejected since cursors must be re-traversable.
    """
    if isinstance(obj, CursorRange):
        return obj.begin(), obj.end()
    if isinstance(obj, deque):
        return bidirectional(obj)
    if isinstance(obj, AB.Sequence):
        return IndexCursor(obj, 0), IndexCursor(obj, len(obj))
    if isinstance(obj, AB.Iterator):
        raise TypeError(
            f'{type(obj).__name__} is a one-shot iterator; '
            f'materialize it into a sequence first')
    raise TypeError(f'cannot make cursors over {type(obj).__name__}')
