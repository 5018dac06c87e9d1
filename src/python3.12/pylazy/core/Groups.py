#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Iterable, Self

import rich.repr as RR

from .Cursors import Cursor, RandomAccessCursor


__all__: list[str] = ['CursorGroup']


class CursorGroup:
    """Fixed-arity group of member cursors: one composite position.

    Three parallel tuples, one slot per member: `current` (the live
    position, the only part ever mutated), `begin` and `end` (snapshots
    taken when the combinator was built).  Copies share the snapshots.
    """
    __slots__ = ('current', 'begin', 'end')
    current: list[Cursor[Any]]
    begin  : tuple[Cursor[Any], ...]
    end    : tuple[Cursor[Any], ...]

    def __init__(self: Self,
                 current: Iterable[Cursor[Any]],
                 begin  : Iterable[Cursor[Any]],
                 end    : Iterable[Cursor[Any]]
    ) -> None:
        self.current = list(current)
        self.begin = tuple(begin)
        self.end = tuple(end)
        if not self.begin:
            raise ValueError('a cursor group needs at least one member')
        if not len(self.current) == len(self.begin) == len(self.end):
            raise ValueError(
                f'mismatched cursor group arity: {len(self.current)} current, '
                f'{len(self.begin)} begin, {len(self.end)} end')

    def __len__(self: Self) -> int:
        return len(self.begin)

    def copy(self: Self) -> CursorGroup:
        group = CursorGroup.__new__(CursorGroup)
        group.current = self.current.copy()
        group.begin = self.begin
        group.end = self.end
        return group

    def exhausted(self: Self, i: int) -> bool:
        return self.current[i] == self.end[i]

    def lengths(self: Self) -> tuple[int, ...]:
        """Per-member sequence lengths.  Random-access members only."""
        return tuple(self.length(i) for i in range(len(self)))

    def length(self: Self, i: int) -> int:
        end: RandomAccessCursor[Any] = self.end[i]  # type: ignore
        return end.distance(self.begin[i])  # type: ignore

    def position(self: Self, i: int) -> int:
        current: RandomAccessCursor[Any] = self.current[i]  # type: ignore
        return current.distance(self.begin[i])  # type: ignore

    def mismatch(self: Self, other: CursorGroup) -> int | None:
        """Index of the first member differing from `other`, scanning left."""
        for i, (mine, theirs) in enumerate(zip(self.current, other.current)):
            if mine != theirs:
                return i
        return None

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, CursorGroup):
            return NotImplemented
        return self.mismatch(other) is None

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self: Self) -> str:
        return f'CursorGroup({self.current!r})'

    def __rich_repr__(self: Self) -> RR.Result:
        yield from self.current
