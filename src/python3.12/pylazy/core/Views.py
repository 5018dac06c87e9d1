#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Final, Iterator, Self

import more_itertools as MI
import rich.repr      as RR

from .Capabilities import Capability, CapabilityError
from .Cursors      import Cursor
from ..config      import Settings


__all__: list[str] = ['View']


_NO_DEFAULT: Final[Any] = object()


class View[C: Cursor[Any]]:
    """Lazy sequence over a begin/end cursor pair.

    The stored cursors are never moved: every traversal starts from a
    copy, so any number of traversals may run side by side.  Operations
    needing more than forward stepping check the cursors' capability and
    raise `CapabilityError` otherwise.
    """
    __slots__ = ('_begin', '_end')
    _begin: C
    _end  : C

    def __init__(self: Self, begin: C, end: C) -> None:
        self._begin = begin
        self._end = end

    def begin(self: Self) -> C:
        return self._begin.copy()

    def end(self: Self) -> C:
        return self._end.copy()

    @property
    def capability(self: Self) -> Capability:
        return self._begin.capability

    def _require(self: Self, capability: Capability, what: str) -> None:
        if not self.capability.satisfies(capability):
            raise CapabilityError(
                f'{what} needs a {capability.name} view, '
                f'{type(self).__name__} is {self.capability.name}')

    def empty(self: Self) -> bool:
        return self._begin == self._end

    def __bool__(self: Self) -> bool:
        return not self.empty()

    def __iter__(self: Self) -> Iterator[Any]:
        cursor, end = self.begin(), self._end
        while cursor != end:
            yield cursor.deref()
            cursor = cursor.next()

    def __reversed__(self: Self) -> Iterator[Any]:
        self._require(Capability.BIDIRECTIONAL, 'reversed()')
        return self._walk_back()

    def _walk_back(self: Self) -> Iterator[Any]:
        cursor, begin = self.end(), self._begin
        while cursor != begin:
            cursor = cursor.prev()  # type: ignore[attr-defined]
            yield cursor.deref()

    def __len__(self: Self) -> int:
        if self.capability.satisfies(Capability.RANDOM_ACCESS):
            return self._end.distance(self._begin)  # type: ignore
        return MI.ilen(self)

    def __getitem__(self: Self, index: int) -> Any:
        self._require(Capability.RANDOM_ACCESS, 'indexing')
        if not isinstance(index, int):
            raise TypeError(
                f'{type(self).__name__} indices must be integers, '
                f'not {type(index).__name__}')
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f'{type(self).__name__} index out of range')
        return self._begin.jump(index).deref()  # type: ignore

    def first(self: Self, default: Any = _NO_DEFAULT) -> Any:
        if self.empty():
            if default is _NO_DEFAULT:
                raise ValueError(f'first() of an empty {type(self).__name__}')
            return default
        return self._begin.deref()

    def last(self: Self, default: Any = _NO_DEFAULT) -> Any:
        if self.empty():
            if default is _NO_DEFAULT:
                raise ValueError(f'last() of an empty {type(self).__name__}')
            return default
        if self.capability.satisfies(Capability.BIDIRECTIONAL):
            return self._end.prev().deref()  # type: ignore[attr-defined]
        return MI.last(iter(self))

    def to_list(self: Self) -> list[Any]:
        return list(self)

    def preview(self: Self) -> list[Any]:
        return MI.take(Settings().REPR_PREVIEW, self)

    def __repr__(self: Self) -> str:
        limit = Settings().REPR_PREVIEW
        items = MI.take(limit + 1, self)
        more = ', ...' if len(items) > limit else ''
        shown = ', '.join(map(repr, items[:limit]))
        return f'{type(self).__name__}([{shown}{more}])'

    def __rich_repr__(self: Self) -> RR.Result:
        yield 'capability', self.capability.name
        yield 'preview', self.preview()
